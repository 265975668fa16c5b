"""Pattern signatures for words: "egg" and "add" both become (0, 1, 1)."""
from typing import Hashable, Iterable, Tuple

Signature = Tuple[int, ...]


def signature_of(word: Iterable[Hashable]):
    """Return (signature, good) for a word.

    Each character gets the number of distinct characters seen before its
    first occurrence, so two words share a signature exactly when one can
    be turned into the other by a one-to-one character substitution.
    """
    seen = {}
    signature = []
    for ch in word:
        if ch not in seen:
            seen[ch] = len(seen)
        signature.append(seen[ch])

    signature = tuple(signature)
    return signature, is_good(signature)


def is_good(signature: Signature) -> bool:
    # at least one character repeats
    return len(set(signature)) != len(signature)

"""Group words by pattern signature and hand out a color key per shared class."""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

from wordsig import signature_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class ColorKey:
    idx: int = 0

    def next(self) -> "ColorKey":
        return ColorKey(self.idx + 1)

    def reify(self, palette):
        """Look up the concrete color for this key in a palette.

        Finite sources wrap the key around their length; unbounded ones are
        indexed directly.
        """
        if hasattr(palette, "__len__"):
            return palette[self.idx % len(palette)]
        return palette[self.idx]


@dataclass(frozen=True)
class ColoredWord:
    value: Any
    key: Optional[ColorKey] = None

    @property
    def colored(self) -> bool:
        return self.key is not None


def classify(items: Iterable[Any], chars: Optional[Callable[[Any], Iterable]] = None) -> List[ColoredWord]:
    """Color every item whose signature is shared and has a repeated character.

    ``chars`` maps an item to the sequence its signature is computed from;
    by default the item itself is used. Output order follows input order and
    keys are handed out in the order qualifying classes are first seen.
    """
    if chars is None:
        chars = lambda item: item

    signed = [(item, signature_of(chars(item))) for item in items]

    # signature -> True once a second word with a good signature shows up
    qualifies = {}
    for _, (sig, good) in signed:
        if sig in qualifies:
            qualifies[sig] = good
        else:
            qualifies[sig] = False

    keys = {}
    next_key = ColorKey()
    result = []
    for item, (sig, _) in signed:
        if not qualifies[sig]:
            result.append(ColoredWord(item))
            continue
        if sig not in keys:
            keys[sig] = next_key
            logger.debug("class %s -> key %d (first word %r)", sig, next_key.idx, item)
            next_key = next_key.next()
        result.append(ColoredWord(item, keys[sig]))

    logger.debug(
        "%d words, %d signatures, %d colored classes",
        len(signed), len(qualifies), len(keys),
    )
    return result


def class_summary(colored: Iterable[ColoredWord]) -> List[Tuple[ColorKey, list]]:
    """Colored classes in key order, each with its words in input order."""
    groups = {}
    for cw in colored:
        if cw.key is not None:
            groups.setdefault(cw.key, []).append(cw.value)
    return sorted(groups.items())

from prompt_toolkit.lexers import Lexer

from isoclass import classify
from palettes import style_of


class IsomorphLexer(Lexer):
    """Colors the words of the prompt buffer that share a good signature.

    Classes are computed over the whole document, so a word on one line
    keeps the color of its partners on other lines.
    """

    def __init__(self, palette, chars=None):
        self.palette = palette
        self.chars = chars

    def lex_document(self, document):
        lines = [line.split(" ") for line in document.lines]
        colored = classify([w for words in lines for w in words], chars=self.chars)

        styled = []
        pos = 0
        for words in lines:
            styled.append(colored[pos:pos + len(words)])
            pos += len(words)

        def get_line(lineno):
            if lineno >= len(styled):
                return []

            tokens = []
            for i, cw in enumerate(styled[lineno]):
                if i:
                    tokens.append(("", " "))
                if not cw.value:
                    continue
                if not cw.colored:
                    tokens.append(("", cw.value))
                else:
                    tokens.append((style_of(cw.key.reify(self.palette)), cw.value))
            return tokens

        return get_line

"""isopaint: color the words of stdin that share a letter pattern.

    $ echo "egg add abc abc" | isopaint

"egg" and "add" come out in the same color; "abc" has no repeated letter
and stays plain even though it appears twice.
"""
import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.style import Style
from rich.text import Text

from isoclass import class_summary, classify
from palettes import PALETTE_NAMES, RESET, ansi_prefix, make_palette

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

EXIT_WORDS = {"exit", "quit"}


@dataclass(frozen=True)
class Settings:
    palette: str = "discrete"
    palette_size: Optional[int] = None
    seed: Optional[int] = None
    ignore_case: bool = False
    summary: bool = False
    interactive: bool = False
    banner: bool = True
    verbose: bool = False

    @classmethod
    def from_args(cls, ns):
        if ns.palette_size is not None and ns.palette_size < 1:
            raise ValueError(f"--palette-size must be a positive integer, got {ns.palette_size}")
        settings = cls(
            palette=ns.palette,
            palette_size=ns.palette_size,
            seed=ns.seed,
            ignore_case=ns.ignore_case,
            summary=ns.summary,
            interactive=ns.interactive,
            banner=not ns.no_banner,
            verbose=ns.verbose,
        )
        # surfaces a bad name/size combination before any input is read
        settings.make_palette()
        return settings

    def make_palette(self):
        return make_palette(self.palette, self.palette_size, self.seed)

    def chars(self, word):
        return word.lower() if self.ignore_case else word


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def split_words(text):
    """Words of a whole input buffer.

    Line breaks are deleted before splitting, so the last word of a line
    runs into the first word of the next one. Only a single space separates
    words; runs of spaces give empty words, which pass through uncolored.
    """
    return text.replace("\r", "").replace("\n", "").split(" ")


def render_word(cw, palette):
    if not cw.colored:
        return cw.value
    return ansi_prefix(cw.key.reify(palette)) + cw.value + RESET


def render_line(colored, palette):
    return "".join(render_word(cw, palette) + " " for cw in colored)


def paint(text, settings, palette=None):
    """Classify ``text`` and return (rendered line, classified words)."""
    if palette is None:
        palette = settings.make_palette()
    colored = classify(split_words(text), chars=settings.chars)
    return render_line(colored, palette), colored


def print_summary(colored, palette):
    groups = class_summary(colored)
    err_console.rule(f"[bold]{len(groups)} isomorph classes[/bold]")
    for key, words in groups:
        style = Style(color=key.reify(palette))
        line = Text(f" {key.idx:>3}  ")
        line.append(" ".join(words), style=style)
        err_console.print(line)


def report_error(code, message):
    err_console.rule(
        f"[bold black on red]   Error {time.strftime('%H:%M', time.localtime())} [/bold black on red]",
        characters="█",
    )
    err_console.print(f" [red]Error Code[/red]: [blue bold]{code}[/blue bold]")
    err_console.print(f" [yellow]{escape(message)}[/yellow]")
    err_console.rule()


def print_banner():
    import pyfiglet

    console.print(escape(pyfiglet.figlet_format("isopaint", font="starwars")))
    console.print("[blue]│[/blue] type words, matching patterns light up. [yellow]exit[/yellow] to leave")


def repl(settings):
    from prompt_toolkit import PromptSession

    from iso_lexer import IsomorphLexer

    palette = settings.make_palette()
    session = PromptSession(lexer=IsomorphLexer(palette, chars=settings.chars))
    if settings.banner:
        print_banner()

    while True:
        try:
            text = session.prompt(f"│   {time.strftime('%H:%M', time.localtime())}  ")
        except (EOFError, KeyboardInterrupt):
            break
        if text.strip().lower() in EXIT_WORDS:
            break
        line, colored = paint(text, settings, palette)
        print(line)
        if settings.summary:
            print_summary(colored, palette)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="isopaint",
        description="Color the words of stdin that share a letter pattern with another word.",
    )
    parser.add_argument("--palette", choices=PALETTE_NAMES, default="discrete",
                        help="color source (default: discrete terminal colors)")
    parser.add_argument("--palette-size", type=int, default=None, metavar="N",
                        help="number of distinct colors before the palette wraps")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random palette")
    parser.add_argument("--ignore-case", action="store_true",
                        help="treat upper and lower case as the same character")
    parser.add_argument("--summary", action="store_true",
                        help="list the colored classes on stderr")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="highlight words while typing")
    parser.add_argument("--no-banner", action="store_true",
                        help="skip the banner in interactive mode")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging on stderr")
    return parser


def main(argv=None):
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        settings = Settings.from_args(ns)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(settings.verbose)
    logger.debug("settings: %s", settings)

    if settings.interactive:
        return repl(settings)

    try:
        text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("reading stdin failed", exc_info=True)
        report_error("READ", f"could not read input: {e}")
        return 1

    palette = settings.make_palette()
    line, colored = paint(text, settings, palette)
    print(line)
    if settings.summary:
        print_summary(colored, palette)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()

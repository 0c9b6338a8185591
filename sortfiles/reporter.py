from typing import Optional

from rich.console import Console
from rich.markup import escape

from .models import RunCounters

RED = "color(9)"
GREEN = "color(28)"
YELLOW = "color(220)"
BLUE = "color(33)"
DARKBLUE = "color(123)"
PURPLE = "color(99)"
ORANGE = "color(209)"

BANNER = [
    (YELLOW, "┳┓  ┏┏┓       ┏┓ ┓"),
    (ORANGE, "┣┫┏┓╋┗┓┏┓┏┓╋  ┏┛ ┃"),
    (RED, "┛┗┗┻┛┗┛┗┛┛ ┗  ┗━•┻"),
]


class Reporter:
    """Colour-coded console output. Info lines are only shown when verbose."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)
        self.verbose = verbose

    def _line(self, tag: str, tag_style: str, message: str, style: Optional[str] = None) -> None:
        text = escape(message)
        if style:
            text = f"[{style}]{text}[/]"
        self.console.print(f"[{tag_style}]\\[{tag}][/] {text}", soft_wrap=True)

    def info(self, message: str, style: Optional[str] = None) -> None:
        if self.verbose:
            self._line("INFO", BLUE, message, style)

    def success(self, message: str) -> None:
        self._line("SUCCESS", GREEN, message)

    def warning(self, message: str) -> None:
        self._line("WARNING", YELLOW, message)

    def error(self, message: str) -> None:
        self._line("ERROR", RED, message)

    def banner(self, dry_run: bool) -> None:
        for style, row in BANNER:
            self.console.print(f"[{style}]{row}[/]", soft_wrap=True)
        self.console.print(f"[{GREEN}]Starting...[/]", soft_wrap=True)
        if dry_run:
            self.console.print(f"[{YELLOW}]DRY RUN MODE - No files will be moved[/]", soft_wrap=True)
        self.console.print()

    def summary(self, counters: RunCounters, dry_run: bool) -> None:
        self.console.print()
        self.console.print(f"[{GREEN}]Total files processed: {counters.total_processed}[/]", soft_wrap=True)
        if dry_run:
            self.console.print(f"[{YELLOW}]This was a dry run - no files were moved[/]", soft_wrap=True)
            self.console.print("Run without --dry-run to perform the actual file operations", soft_wrap=True)
            return
        self.console.print(f"[{GREEN}]Moved {counters.total_moved} files[/]", soft_wrap=True)
        if counters.total_failed:
            self.console.print(f"[{RED}]{counters.total_failed} files could not be moved[/]", soft_wrap=True)
        self.console.print(
            f"[{GREEN}]Process ended in [{YELLOW}]{counters.elapsed:.0f}[/]s "
            f"with exit code [{YELLOW}]0[/].[/]",
            soft_wrap=True,
        )

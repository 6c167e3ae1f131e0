"""Interactive stop selection on the terminal using rich."""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from siri_departures.domain.models import Choice

logger = logging.getLogger(__name__)

ALL_KEYWORD = "all"
SEARCH_HINT = "number to select, text to search, empty to cancel"
CHECKBOX_HINT = "e.g. 1,3 or 2-4, 'all', empty for none"


def parse_selection(answer: str, count: int) -> list[int] | None:
    """Parse a checkbox answer into zero-based indexes.

    Accepts comma or space separated numbers, ranges ("2-4") and "all".
    An empty answer selects nothing. Returns None if the answer is invalid.
    """
    answer = answer.strip().lower()
    if not answer:
        return []
    if answer == ALL_KEYWORD:
        return list(range(count))

    indexes: list[int] = []
    for token in answer.replace(",", " ").split():
        start_str, sep, end_str = token.partition("-")
        if not start_str.isdigit() or (sep and not end_str.isdigit()):
            return None
        start = int(start_str)
        end = int(end_str) if end_str else start
        if not 1 <= start <= end <= count:
            return None
        for number in range(start, end + 1):
            if number - 1 not in indexes:
                indexes.append(number - 1)
    return sorted(indexes)


class RichStopSelector:
    """Terminal implementation of the StopSelector port.

    Search works in rounds: the candidates matching the current query are
    listed with numbers; typing a listed number picks it, any other text
    becomes the next query, and an empty answer (or Ctrl-C) cancels.
    """

    def __init__(self, console: Console | None = None, page_size: int = 10) -> None:
        """Initialize with an optional console and the number of candidates shown."""
        self._console = console or Console()
        self._page_size = page_size

    def _render_choices(self, choices: list[Choice], total: int | None = None) -> None:
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column("#", justify="right", style="bold cyan")
        table.add_column("Candidate")
        for number, choice in enumerate(choices, 1):
            table.add_row(str(number), escape(choice.label))
        self._console.print(table)
        if total is not None and total > len(choices):
            self._console.print(f"[dim]... {total - len(choices)} more, refine your search[/dim]")

    def _ask(self, message: str) -> str | None:
        """Prompt for a line of input; None on Ctrl-C or end of input."""
        try:
            return Prompt.ask(message, console=self._console, default="", show_default=False)
        except (KeyboardInterrupt, EOFError):
            self._console.print()
            return None

    def search(self, message: str, source: Callable[[str], list[Choice]]) -> str | None:
        """Incrementally search candidates; returns the chosen value or None."""
        query = ""
        while True:
            candidates = source(query)
            shown = candidates[: self._page_size]
            if shown:
                self._render_choices(shown, total=len(candidates))
            else:
                self._console.print(f"[yellow]No match for '{escape(query)}'[/yellow]")

            answer = self._ask(f"{escape(message)} [dim]({SEARCH_HINT})[/dim]")
            if answer is None or not answer.strip():
                logger.debug("Search cancelled by user")
                return None

            answer = answer.strip()
            if answer.isdigit() and 1 <= int(answer) <= len(shown):
                return shown[int(answer) - 1].value
            query = answer

    def checkbox(self, message: str, choices: list[Choice]) -> list[str]:
        """Let the user check choices by number; returns checked values in list order."""
        if not choices:
            self._console.print("[yellow]Nothing to select[/yellow]")
            return []

        self._render_choices(choices)
        while True:
            answer = self._ask(f"{escape(message)} [dim]({CHECKBOX_HINT})[/dim]")
            if answer is None:
                return []

            indexes = parse_selection(answer, len(choices))
            if indexes is not None:
                return [choices[i].value for i in indexes]
            self._console.print(f"[red]Invalid selection '{escape(answer)}'[/red]")

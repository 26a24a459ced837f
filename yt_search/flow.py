"""Search, select and launch orchestration.

The flow never touches the OS process itself: a successful run returns a
``LaunchAction`` that the CLI hands to ``player.execute``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional
from urllib.parse import quote_plus

from rich.console import Console
from rich.markup import escape

from .client import InvidiousClient
from .config import AppConfig
from .instances import InstanceResolver
from .logging_utils import get_logger
from .models import SearchResult
from .player import LaunchAction, build_launch, target_url
from .preview import render_preview

Picker = Callable[[List[SearchResult], int], Optional[SearchResult]]


class FlowState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SELECTING = "selecting"
    CONFIRMING = "confirming"
    LAUNCHING = "launching"
    CANCELLED = "cancelled"


class FlowOutcome(str, Enum):
    EMPTY_QUERY = "empty_query"
    NO_RESULTS = "no_results"
    CANCELLED = "cancelled"
    UNSUPPORTED = "unsupported"
    LAUNCH = "launch"


@dataclass
class FlowResult:
    outcome: FlowOutcome
    choice: Optional[SearchResult] = None
    action: Optional[LaunchAction] = None


def build_query(terms: Iterable[str]) -> str:
    """Join free-text terms into an encoded query; spaces become ``+``."""
    words = [t.strip() for t in terms if t and t.strip()]
    return quote_plus(" ".join(words))


class SearchFlow:
    def __init__(
        self,
        config: AppConfig,
        resolver: InstanceResolver,
        client: InvidiousClient,
        picker: Picker,
        console: Console | None = None,
        terminal_width: int = 80,
    ):
        self.config = config
        self.state = FlowState.IDLE
        self._resolver = resolver
        self._client = client
        self._picker = picker
        self._console = console or Console()
        self._terminal_width = terminal_width
        self._log = get_logger()

    def run(self, terms: Iterable[str]) -> FlowResult:
        query = build_query(terms)
        if not query:
            self._log.debug("Empty query, nothing to do")
            return FlowResult(FlowOutcome.EMPTY_QUERY)

        self.state = FlowState.SEARCHING
        base = self._resolver.resolve()
        self._console.print(f"searching [bold]{escape(query)}[/bold] on {escape(base)}")
        results = self._client.search(base, query)
        self._log.info("Search returned %d results", len(results))
        if not results:
            self.state = FlowState.CANCELLED
            self._console.print("[yellow]No results.[/yellow]")
            return FlowResult(FlowOutcome.NO_RESULTS)

        self.state = FlowState.SELECTING
        choice = self._picker(results, self._terminal_width)
        if choice is None:
            self.state = FlowState.CANCELLED
            return FlowResult(FlowOutcome.CANCELLED)

        self.state = FlowState.CONFIRMING
        url = target_url(choice, self.config.watch_base)
        if url is None:
            self.state = FlowState.CANCELLED
            self._console.print(
                f"[yellow]Cannot open '{escape(choice.kind_label)}' results.[/yellow]"
            )
            return FlowResult(FlowOutcome.UNSUPPORTED, choice=choice)
        self._console.print(
            f"chosen [bold]{escape(choice.title or '<no-title>')}[/bold], opening {escape(url)}"
        )
        if self.config.preview:
            render_preview(choice, base, self._console)

        self.state = FlowState.LAUNCHING
        action = build_launch(url, self.config.player, self.config.player_args)
        return FlowResult(FlowOutcome.LAUNCH, choice=choice, action=action)


__all__ = ["FlowOutcome", "FlowResult", "FlowState", "SearchFlow", "build_query"]

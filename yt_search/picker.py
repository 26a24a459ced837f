# picker.py

from typing import List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, OptionList, Static
from textual.widgets.option_list import Option

from .formatting import MAX_WIDTH, NO_AUTHOR, NO_TITLE, format_duration, format_result
from .models import SearchResult


class DetailsPane(Static):
    """Shows the highlighted result in full."""

    def update_details(self, result: Optional[SearchResult]) -> None:
        if result is None:
            self.update("")
            return
        text = Text()
        text.append(result.title or NO_TITLE, style="bold")
        text.append(f"  [{result.kind_label}]\n", style="dim")
        text.append(result.author or NO_AUTHOR)
        extras = [
            format_duration(result.length_seconds),
            result.view_count_text or "",
            result.published_text or "",
        ]
        if result.video_count is not None:
            extras.append(f"{result.video_count} videos")
        extras = [e for e in extras if e]
        if extras:
            text.append("  " + " · ".join(extras), style="cyan")
        if result.thumbnails:
            text.append(f"\n{result.thumbnails[0].url}", style="dim")
        if result.description:
            text.append("\n\n" + result.description)
        self.update(text)


class PickerApp(App[Optional[SearchResult]]):
    """Single-choice list of search results.

    Exits with the chosen result, or None when the user backs out.
    """

    TITLE = "Video results"
    CSS = """
    #results { height: 2fr; }
    #details { height: 1fr; border-top: solid $accent; padding: 0 1; }
    """
    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("q", "cancel", "Quit", show=False),
        Binding("j", "vim('cursor_down')", "Down", show=False),
        Binding("k", "vim('cursor_up')", "Up", show=False),
        Binding("g", "vim('first')", "First", show=False),
        Binding("G,shift+g", "vim('last')", "Last", show=False),
    ]

    def __init__(
        self,
        results: List[SearchResult],
        terminal_width: int,
        vim_mode: bool = True,
        max_width: int = MAX_WIDTH,
        prompt: str = "Video results:",
    ):
        super().__init__()
        self._results = results
        self._terminal_width = terminal_width
        self._vim_mode = vim_mode
        self._max_width = max_width
        self._prompt = prompt

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self._prompt, id="prompt")
            yield OptionList(
                *[
                    Option(Text(format_result(r, self._terminal_width, self._max_width), no_wrap=True), id=str(i))
                    for i, r in enumerate(self._results)
                ],
                id="results",
            )
            yield DetailsPane(id="details")
        yield Footer()

    def on_mount(self) -> None:
        options = self.query_one(OptionList)
        options.focus()
        if self._results:
            options.highlighted = 0

    def _result_for(self, option_id: Optional[str]) -> Optional[SearchResult]:
        if option_id is None:
            return None
        return self._results[int(option_id)]

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        self.query_one(DetailsPane).update_details(self._result_for(event.option.id))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(self._result_for(event.option.id))

    def action_vim(self, action: str) -> None:
        if not self._vim_mode:
            return
        options = self.query_one(OptionList)
        getattr(options, f"action_{action}")()

    def action_cancel(self) -> None:
        self.exit(None)


def pick(
    results: List[SearchResult],
    terminal_width: int,
    vim_mode: bool = True,
    max_width: int = MAX_WIDTH,
) -> Optional[SearchResult]:
    """Run the picker full-screen and return the chosen result."""
    if not results:
        return None
    return PickerApp(results, terminal_width, vim_mode=vim_mode, max_width=max_width).run()

"""Deck screen - workload topology list, details pane and command bar."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Input, Label, Static

from kubedeck.constants.enums import InputMode, ItemKind
from kubedeck.constants.timeouts import REFRESH_INTERVAL, STATUS_MESSAGE_TIMEOUT
from kubedeck.constants.values import COLOR_ERROR, COLOR_MUTED, COLOR_SUCCESS, COLOR_WARNING
from kubedeck.keyboard.navigation import DECK_SCREEN_BINDINGS
from kubedeck.screens.deck.config import (
    INPUT_PROMPTS,
    ITEM_TABLE_COLUMNS,
    KIND_STYLES,
    SHORTCUT_VERBS,
    TAB_LABELS,
)
from kubedeck.screens.deck.presenter import (
    CommandFinished,
    DeckPresenter,
    DetailsLoaded,
    SuggestionsLoaded,
    TopologyLoaded,
    TopologyLoadFailed,
    filter_suggestions,
)
from kubedeck.screens.mixins.worker_mixin import WorkerMixin

logger = logging.getLogger(__name__)


def _status_style(status: str) -> str:
    if status.startswith("Running"):
        return COLOR_SUCCESS
    if status.startswith("Terminating"):
        return COLOR_MUTED
    return COLOR_WARNING


class DeckScreen(WorkerMixin, Screen[None]):
    """Main screen: monitored workloads on the left, details on the right."""

    BINDINGS = DECK_SCREEN_BINDINGS

    def __init__(
        self,
        presenter_factory: Any,
        context_label: str = "",
        refresh_interval: float = REFRESH_INTERVAL,
    ) -> None:
        """Initialize the deck screen.

        Args:
            presenter_factory: Callable taking this screen and returning its
                DeckPresenter.
            context_label: Cluster context shown in the status line.
            refresh_interval: Seconds between automatic refresh passes.
        """
        super().__init__()
        self.presenter: DeckPresenter = presenter_factory(self)
        self.context_label = context_label
        self.refresh_interval = refresh_interval
        self.input_mode = InputMode.NONE
        self._refreshes_in_flight = 0
        self._pending_restart = False
        self._suggestion_pool: list[str] = []
        self._suggestions: list[str] = []
        self._suggestion_index = 0
        self._last_update: datetime | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="deck-body"):
            with Vertical(id="list-pane"):
                yield Static("", id="status-line")
                yield DataTable(id="items-table", cursor_type="row", zebra_stripes=False)
            with Vertical(id="details-pane"):
                yield Static("", id="details-tabs")
                with VerticalScroll(id="details-scroll"):
                    yield Static("", id="details", markup=False)
        with Vertical(id="input-bar", classes="hidden"):
            yield Label("", id="input-prompt")
            yield Input(id="command-input")
            yield Static("", id="suggestions")
        yield Static("", id="flash-line")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#items-table", DataTable)
        for label, width in ITEM_TABLE_COLUMNS:
            table.add_column(label, width=width)
        table.focus()
        self.action_refresh()
        self.set_interval(self.refresh_interval, self._on_refresh_tick)

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    def _on_refresh_tick(self) -> None:
        if not self._refreshes_in_flight:
            self.action_refresh()

    def action_refresh(self) -> None:
        self._refreshes_in_flight += 1
        self.start_worker(
            self._refresh_worker, exclusive=False, name="topology-refresh", group="topology"
        )

    async def _refresh_worker(self) -> None:
        try:
            await self.presenter.load_topology()
        finally:
            self._refreshes_in_flight -= 1

    def on_topology_loaded(self, message: TopologyLoaded) -> None:
        self.presenter.apply_topology(message.data)
        self._last_update = datetime.now()
        self._populate_table()
        self._update_status_line()
        self._request_details()

    def on_topology_load_failed(self, message: TopologyLoadFailed) -> None:
        self.presenter.last_error = message.error
        self._update_status_line()

    def _populate_table(self) -> None:
        table = self.query_one("#items-table", DataTable)
        table.clear()
        for item in self.presenter.items:
            style = KIND_STYLES.get(item.kind, "")
            if item.kind is ItemKind.HEADER:
                table.add_row(Text(""), Text(item.name, style=style), Text(""))
                continue
            status_style = _status_style(item.status) if item.kind is ItemKind.INSTANCE else ""
            table.add_row(
                Text(item.type_code, style=style),
                Text(item.name),
                Text(item.status, style=status_style),
            )
        if self.presenter.items:
            table.move_cursor(row=self.presenter.cursor)

    def _update_status_line(self) -> None:
        line = self.query_one("#status-line", Static)
        if self.presenter.last_error:
            line.update(Text(f"Err: {self.presenter.last_error}", style=COLOR_ERROR))
            return
        stamp = self._last_update.strftime("%H:%M:%S") if self._last_update else "--:--:--"
        line.update(Text(f"{stamp} | {self.context_label}", style=COLOR_MUTED))

    # ------------------------------------------------------------------
    # Details
    # ------------------------------------------------------------------

    def _request_details(self) -> None:
        item = self.presenter.current_item
        if item is None:
            return
        self._update_tabs()
        self.start_worker(
            self.presenter.load_details(item, self.presenter.tab),
            exclusive=True,
            name="details",
            group="details",
        )

    def _update_tabs(self) -> None:
        item = self.presenter.current_item
        labels = TAB_LABELS.get(item.kind, ()) if item is not None else ()
        text = Text()
        for index, label in enumerate(labels):
            style = "bold reverse" if index == self.presenter.tab else COLOR_MUTED
            text.append(f" {label} ", style=style)
        if not self.presenter.format_mode:
            text.append("  raw", style=COLOR_MUTED)
        self.query_one("#details-tabs", Static).update(text)

    def _render_details(self) -> None:
        self.query_one("#details", Static).update(self.presenter.render_details())

    def on_details_loaded(self, message: DetailsLoaded) -> None:
        current = self.presenter.current_item
        if current is None or current.key != message.item.key or message.tab != self.presenter.tab:
            return
        self.query_one("#details", Static).update(
            self.presenter.render_details(message.details)
        )

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        # Highlights queued before a repopulate no longer match the table
        if event.cursor_row != event.data_table.cursor_row:
            return
        if self.presenter.select(event.cursor_row):
            self._pending_restart = False
            self.presenter.details = None
            self.query_one("#details", Static).update(Text("Loading...", style=COLOR_MUTED))
            self.query_one("#details-scroll", VerticalScroll).scroll_home(animate=False)
            self._request_details()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        self._request_details()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_cursor_down(self) -> None:
        self.query_one("#items-table", DataTable).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#items-table", DataTable).action_cursor_up()

    def action_jump(self, key: str) -> None:
        self._pending_restart = False
        if self.presenter.jump(key):
            self.query_one("#items-table", DataTable).move_cursor(row=self.presenter.cursor)
            self._request_details()

    def action_next_tab(self) -> None:
        if self.input_mode in (InputMode.ADD, InputMode.REMOVE):
            self._complete_suggestion()
            return
        if self.input_mode is not InputMode.NONE:
            return
        self._pending_restart = False
        self.presenter.cycle_tab()
        self._request_details()

    def action_toggle_format(self) -> None:
        self._pending_restart = False
        self.presenter.format_mode = not self.presenter.format_mode
        self._update_tabs()
        self._render_details()

    def action_yank(self) -> None:
        self._pending_restart = False
        self.app.copy_to_clipboard(self.presenter.plain_content)
        self.flash("Yanked to clipboard")

    def action_scroll_details(self, direction: int) -> None:
        scroll = self.query_one("#details-scroll", VerticalScroll)
        scroll.scroll_relative(y=direction * max(1, scroll.size.height // 2), animate=False)

    def action_restart_prefix(self) -> None:
        if self._pending_restart:
            self._pending_restart = False
            if self.presenter.current_workload:
                self._run_command("restart")
            return
        self._pending_restart = True

    def action_open_input(self, mode: str) -> None:
        self._pending_restart = False
        self.input_mode = InputMode(mode)
        prompt, placeholder = INPUT_PROMPTS[self.input_mode]
        self.query_one("#input-prompt", Label).update(prompt)
        field = self.query_one("#command-input", Input)
        field.placeholder = placeholder
        field.value = self.presenter.filter_text if self.input_mode is InputMode.FILTER else ""
        self.query_one("#input-bar").remove_class("hidden")
        field.focus()

        self._suggestion_pool = []
        if self.input_mode is InputMode.ADD:
            self.start_worker(
                self.presenter.load_suggestions(),
                exclusive=True,
                name="suggestions",
                group="suggestions",
            )
        elif self.input_mode is InputMode.REMOVE:
            self._suggestion_pool = list(self.presenter.targets)
        self._update_suggestions("")

    def action_cancel(self) -> None:
        if self.input_mode is not InputMode.NONE:
            self._close_input()
            return
        if self.presenter.filter_text:
            self.presenter.filter_text = ""
            self._render_details()

    # ------------------------------------------------------------------
    # Command bar
    # ------------------------------------------------------------------

    def _close_input(self) -> None:
        self.input_mode = InputMode.NONE
        field = self.query_one("#command-input", Input)
        field.value = ""
        self.query_one("#input-bar").add_class("hidden")
        self._suggestions = []
        self.query_one("#suggestions", Static).update("")
        self.query_one("#items-table", DataTable).focus()

    def _update_suggestions(self, text: str) -> None:
        exclude = self.presenter.targets if self.input_mode is InputMode.ADD else ()
        self._suggestions = filter_suggestions(self._suggestion_pool, text, exclude)
        self._suggestion_index = 0
        self._render_suggestions()

    def _render_suggestions(self) -> None:
        text = Text()
        for index, name in enumerate(self._suggestions):
            style = "bold reverse" if index == self._suggestion_index else COLOR_MUTED
            text.append(f" {name} ", style=style)
        self.query_one("#suggestions", Static).update(text)

    def _complete_suggestion(self) -> None:
        if not self._suggestions:
            return
        field = self.query_one("#command-input", Input)
        field.value = self._suggestions[self._suggestion_index]
        field.cursor_position = len(field.value)
        self._suggestion_index = (self._suggestion_index + 1) % len(self._suggestions)
        self._render_suggestions()

    def on_suggestions_loaded(self, message: SuggestionsLoaded) -> None:
        if self.input_mode is not InputMode.ADD:
            return
        self._suggestion_pool = message.names
        self._update_suggestions(self.query_one("#command-input", Input).value)

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.input_mode in (InputMode.ADD, InputMode.REMOVE):
            self._update_suggestions(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        mode = self.input_mode
        value = event.value.strip()
        self._close_input()
        if mode is InputMode.FILTER:
            self.presenter.filter_text = value
            self._render_details()
        elif mode is InputMode.COMMAND:
            if value:
                self._run_command(value)
        elif mode in SHORTCUT_VERBS:
            self._run_command(f"{SHORTCUT_VERBS[mode]} {value}".strip())

    def _run_command(self, command: str) -> None:
        self.start_worker(
            self.presenter.run_command(command),
            exclusive=False,
            name="command",
            group="commands",
        )

    def on_command_finished(self, message: CommandFinished) -> None:
        result = message.result
        if result.success:
            self.flash(result.message)
        else:
            self.flash(f"Error: {result.message}", style=COLOR_ERROR)
        if result.refresh:
            self.action_refresh()

    # ------------------------------------------------------------------
    # Status messages
    # ------------------------------------------------------------------

    def flash(self, message: str, style: str = COLOR_SUCCESS) -> None:
        """Show a transient status message."""
        line = self.query_one("#flash-line", Static)
        line.update(Text(message, style=style))
        self.set_timer(STATUS_MESSAGE_TIMEOUT, lambda: line.update(""))

"""Deck screen presenter - data loading, selection state and details rendering."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from rich.console import RenderableType
from rich.syntax import Syntax
from rich.text import Text
from textual.message import Message

from kubedeck.constants.enums import ItemKind
from kubedeck.constants.limits import MAX_SUGGESTIONS
from kubedeck.constants.values import COLOR_ERROR, COLOR_MUTED
from kubedeck.controllers.commands.executor import CommandExecutor, CommandResult
from kubedeck.controllers.topology.controller import (
    INSTANCE_TAB_LOGS,
    TAB_COUNTS,
    WORKLOAD_TAB_LOGS,
    Details,
    FetchResult,
    TopologyController,
)
from kubedeck.models.cache.multi_container_cache import MultiContainerCache
from kubedeck.models.cache.state_cache import StateCache
from kubedeck.models.core.item import Item, header_target
from kubedeck.models.state.targets import TargetSet
from kubedeck.screens.mixins.worker_mixin import DataLoaded, DataLoadFailed
from kubedeck.utils.log_classifier import process_log_content

if TYPE_CHECKING:
    from textual.screen import Screen

logger = logging.getLogger(__name__)

SYNTAX_THEME = "dracula"

# Number keys jump to the next row of a kind
JUMP_KINDS: dict[str, ItemKind] = {
    "1": ItemKind.WORKLOAD,
    "2": ItemKind.RELEASE,
    "3": ItemKind.CONFIG,
    "4": ItemKind.SECRET,
    "5": ItemKind.INSTANCE,
}


# =============================================================================
# Worker Messages
# =============================================================================


class TopologyLoaded(DataLoaded):
    """A refresh pass finished; ``data`` is the FetchResult."""


class TopologyLoadFailed(DataLoadFailed):
    """A refresh pass could not run at all."""


class DetailsLoaded(Message):
    """Details for ``item`` on ``tab`` are ready."""

    def __init__(self, item: Item, tab: int, details: Details) -> None:
        super().__init__()
        self.item = item
        self.tab = tab
        self.details = details


class CommandFinished(Message):
    def __init__(self, result: CommandResult) -> None:
        super().__init__()
        self.result = result


class SuggestionsLoaded(Message):
    def __init__(self, names: list[str]) -> None:
        super().__init__()
        self.names = names


# =============================================================================
# Selection helpers
# =============================================================================


def restore_cursor(
    previous: Item | None, items: Sequence[Item], cursor: int, owner: str = ""
) -> int:
    """Cursor position after the list was replaced.

    The previously selected row is found again by kind and name. Shared
    config maps and secrets repeat in several groups, so among matches the
    one in ``owner``'s group wins, then the one nearest the old index. When
    the row is gone the old index is clamped to the new list.
    """
    if not items:
        return 0
    if previous is not None:
        matches = [index for index, item in enumerate(items) if item.key == previous.key]
        if matches:
            return min(
                matches,
                key=lambda index: (owning_workload(items, index) != owner, abs(index - cursor)),
            )
    return max(0, min(cursor, len(items) - 1))


def owning_workload(items: Sequence[Item], cursor: int) -> str:
    """Name of the workload the row at ``cursor`` belongs to.

    Rows belong to the group they sit in; a header names its own workload,
    including the error header of a workload that failed to load.
    """
    if not 0 <= cursor < len(items):
        return ""
    for index in range(cursor, -1, -1):
        item = items[index]
        if item.kind is ItemKind.WORKLOAD:
            return item.name
        if item.kind is ItemKind.HEADER:
            return header_target(item.name)
    return ""


def find_next_of_kind(items: Sequence[Item], cursor: int, kind: ItemKind) -> int | None:
    """Index of the next row of ``kind`` after ``cursor``, wrapping around."""
    if not items:
        return None
    start = cursor + 1 if 0 <= cursor < len(items) and items[cursor].kind is kind else 0
    for index in [*range(start, len(items)), *range(0, start)]:
        if items[index].kind is kind:
            return index
    return None


def next_tab(item: Item | None, tab: int) -> int:
    count = TAB_COUNTS.get(item.kind, 1) if item is not None else 1
    return (tab + 1) % count


def is_log_view(item: Item, tab: int) -> bool:
    return (item.kind is ItemKind.WORKLOAD and tab == WORKLOAD_TAB_LOGS) or (
        item.kind is ItemKind.INSTANCE and tab == INSTANCE_TAB_LOGS
    )


def filter_lines(content: str, needle: str) -> str:
    """Lines containing ``needle``, case-insensitively; empty when none match."""
    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    return "\n".join(line for line in content.split("\n") if pattern.search(line))


def filter_suggestions(
    candidates: Iterable[str], text: str, exclude: Iterable[str] = ()
) -> list[str]:
    """Candidates containing ``text``, minus excluded names, capped for display."""
    needle = text.strip().lower()
    excluded = set(exclude)
    matches = [
        name for name in candidates if needle in name.lower() and name not in excluded
    ]
    return matches[:MAX_SUGGESTIONS]


# =============================================================================
# Presenter
# =============================================================================


class DeckPresenter:
    """Presenter for DeckScreen - owns list state and talks to controllers."""

    def __init__(
        self,
        screen: Screen[Any],
        controller: TopologyController,
        executor: CommandExecutor,
        targets: TargetSet,
        state_cache: StateCache,
        multi_container_cache: MultiContainerCache,
        format_mode: bool = True,
    ) -> None:
        self._screen = screen
        self._controller = controller
        self._executor = executor
        self.targets = targets
        self.state_cache = state_cache
        self.multi_container_cache = multi_container_cache
        self.items: tuple[Item, ...] = ()
        self.cursor = 0
        self.tab = 0
        self.format_mode = format_mode
        self.filter_text = ""
        self.last_error: str | None = None
        self.details: Details | None = None
        self.plain_content = ""

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_item(self) -> Item | None:
        if 0 <= self.cursor < len(self.items):
            return self.items[self.cursor]
        return None

    @property
    def current_workload(self) -> str:
        return owning_workload(self.items, self.cursor)

    def apply_topology(self, result: FetchResult) -> None:
        """Replace the item list, keeping the selection where possible."""
        previous = self.current_item
        owner = self.current_workload
        self.items = result.items
        self.cursor = restore_cursor(previous, self.items, self.cursor, owner)
        if previous is None or self.current_item is None or previous.key != self.current_item.key:
            self.tab = 0
        self.last_error = result.error
        for name, warning in result.warnings.items():
            logger.info("Refresh warning for %s: %s", name, warning)

    def select(self, cursor: int) -> bool:
        """Move the selection; returns False when it did not change."""
        if cursor == self.cursor or not 0 <= cursor < len(self.items):
            return False
        self.cursor = cursor
        self.tab = 0
        return True

    def cycle_tab(self) -> None:
        self.tab = next_tab(self.current_item, self.tab)

    def jump(self, key: str) -> bool:
        kind = JUMP_KINDS.get(key)
        if kind is None:
            return False
        found = find_next_of_kind(self.items, self.cursor, kind)
        if found is None:
            return False
        self.cursor = found
        self.tab = 0
        return True

    # ------------------------------------------------------------------
    # Workers
    # ------------------------------------------------------------------

    async def load_topology(self) -> None:
        """Run one refresh pass and merge its cache deltas."""
        result = await self._controller.run_timed(
            self._controller.fetch_all(
                self.targets.snapshot(), self.state_cache.selectors_snapshot()
            )
        )
        if not result.success:
            self._screen.post_message(TopologyLoadFailed(result.error or "Refresh failed"))
            return
        fetched: FetchResult = result.data
        self.state_cache.merge(fetched.selectors, fetched.releases)
        self._screen.post_message(TopologyLoaded(fetched, result.duration_ms))

    async def load_details(self, item: Item, tab: int) -> None:
        details = await self._controller.fetch_details(
            item, tab, self.state_cache.selectors_snapshot(), self.multi_container_cache
        )
        self._screen.post_message(DetailsLoaded(item, tab, details))

    async def run_command(self, command: str) -> None:
        workload = self.current_workload
        release = self.state_cache.get_release(workload) if workload else ""
        result = await self._executor.execute(command, workload or None, release or None)
        self._screen.post_message(CommandFinished(result))

    async def load_suggestions(self) -> None:
        names = await self._controller.list_workload_names(exclude=self.targets)
        self._screen.post_message(SuggestionsLoaded(names))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_details(self, details: Details | None = None) -> RenderableType:
        """Build the details pane renderable for the current selection.

        Also records the visible text in ``plain_content`` for yanking.
        """
        if details is not None:
            self.details = details
        details = self.details
        item = self.current_item
        if details is None or item is None:
            self.plain_content = ""
            return Text("")
        if details.error:
            self.plain_content = f"Error: {details.error}"
            return Text(self.plain_content, style=COLOR_ERROR)

        content = details.content.replace("\r\n", "\n")
        if self.filter_text:
            content = filter_lines(content, self.filter_text)
            if not content:
                self.plain_content = f"No results found for filter: {self.filter_text}"
                return Text(self.plain_content, style=COLOR_MUTED)
        self.plain_content = content

        if is_log_view(item, self.tab):
            rendered = process_log_content(content, self.format_mode)
            text = Text.from_markup(rendered) if self.format_mode else Text(rendered)
        elif details.is_structured and not self.filter_text:
            return Syntax(
                content, details.language or "yaml", theme=SYNTAX_THEME, word_wrap=True
            )
        else:
            text = Text(content)

        if self.filter_text:
            text.highlight_words([self.filter_text], style="reverse", case_sensitive=False)
        return text

"""Tests for the deck screen presenter."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from rich.syntax import Syntax
from rich.text import Text

from kubedeck.constants.enums import ItemKind
from kubedeck.controllers.commands.executor import CommandExecutor
from kubedeck.controllers.topology.controller import Details, FetchResult, TopologyController
from kubedeck.models.cache.multi_container_cache import MultiContainerCache
from kubedeck.models.cache.state_cache import StateCache
from kubedeck.models.core.item import Item, header_name
from kubedeck.models.state.targets import TargetSet
from kubedeck.screens.deck.presenter import (
    CommandFinished,
    DeckPresenter,
    DetailsLoaded,
    SuggestionsLoaded,
    TopologyLoaded,
    TopologyLoadFailed,
    filter_lines,
    filter_suggestions,
    find_next_of_kind,
    is_log_view,
    next_tab,
    owning_workload,
    restore_cursor,
)

ITEMS = (
    Item(ItemKind.HEADER, "=== api ==="),
    Item(ItemKind.WORKLOAD, "api", "Active"),
    Item(ItemKind.INSTANCE, "api-1", "Running 1/1"),
    Item(ItemKind.HEADER, "=== web ==="),
    Item(ItemKind.WORKLOAD, "web", "Active"),
    Item(ItemKind.RELEASE, "web-release", "Release"),
    Item(ItemKind.SECRET, "web-secret", "Ref"),
    Item(ItemKind.CONFIG, "web-config", "Ref"),
    Item(ItemKind.INSTANCE, "web-1", "Running 1/1"),
)

SHARED_CONFIG = (
    Item(ItemKind.HEADER, header_name("api")),
    Item(ItemKind.WORKLOAD, "api", "Active"),
    Item(ItemKind.CONFIG, "common", "Ref"),
    Item(ItemKind.HEADER, header_name("web")),
    Item(ItemKind.WORKLOAD, "web", "Active"),
    Item(ItemKind.CONFIG, "common", "Ref"),
)

WITH_FAILED = (
    Item(ItemKind.HEADER, header_name("api")),
    Item(ItemKind.WORKLOAD, "api", "Active"),
    Item(ItemKind.HEADER, header_name("broken", failed=True)),
)


# =============================================================================
# Selection helpers
# =============================================================================


class TestRestoreCursor:
    """Tests for restore_cursor."""

    def test_follows_item(self) -> None:
        previous = Item(ItemKind.INSTANCE, "web-1", "Pending 0/1")
        assert restore_cursor(previous, ITEMS, 2) == 8

    def test_clamps_when_item_gone(self) -> None:
        previous = Item(ItemKind.INSTANCE, "gone", "")
        assert restore_cursor(previous, ITEMS[:3], 7) == 2

    def test_empty_list(self) -> None:
        assert restore_cursor(None, (), 5) == 0

    def test_shared_config_stays_in_owner_group(self) -> None:
        assert restore_cursor(SHARED_CONFIG[5], SHARED_CONFIG, 5, owner="web") == 5
        assert restore_cursor(SHARED_CONFIG[2], SHARED_CONFIG, 2, owner="api") == 2

    def test_shared_config_prefers_nearest_without_owner(self) -> None:
        assert restore_cursor(SHARED_CONFIG[5], SHARED_CONFIG, 4) == 5


class TestOwningWorkload:
    """Tests for owning_workload."""

    @pytest.mark.parametrize(
        ("cursor", "expected"),
        [(0, "api"), (1, "api"), (2, "api"), (3, "web"), (8, "web")],
    )
    def test_row_belongs_to_its_group(self, cursor: int, expected: str) -> None:
        assert owning_workload(ITEMS, cursor) == expected

    def test_error_header_names_failed_workload(self) -> None:
        assert owning_workload(WITH_FAILED, 2) == "broken"

    def test_out_of_range(self) -> None:
        assert owning_workload(ITEMS, 99) == ""


class TestFindNextOfKind:
    """Tests for find_next_of_kind."""

    def test_next_instance(self) -> None:
        assert find_next_of_kind(ITEMS, 2, ItemKind.INSTANCE) == 8

    def test_wraps_around(self) -> None:
        assert find_next_of_kind(ITEMS, 8, ItemKind.INSTANCE) == 2

    def test_from_other_kind_starts_at_top(self) -> None:
        assert find_next_of_kind(ITEMS, 5, ItemKind.WORKLOAD) == 1

    def test_missing_kind(self) -> None:
        assert find_next_of_kind(ITEMS[:3], 0, ItemKind.SECRET) is None


class TestTabs:
    """Tests for next_tab and is_log_view."""

    def test_workload_cycles_three(self) -> None:
        item = Item(ItemKind.WORKLOAD, "web")
        assert [next_tab(item, t) for t in (0, 1, 2)] == [1, 2, 0]

    def test_instance_cycles_two(self) -> None:
        item = Item(ItemKind.INSTANCE, "web-1")
        assert [next_tab(item, t) for t in (0, 1)] == [1, 0]

    def test_single_tab_kinds(self) -> None:
        assert next_tab(Item(ItemKind.SECRET, "s"), 0) == 0
        assert next_tab(None, 0) == 0

    def test_log_views(self) -> None:
        assert is_log_view(Item(ItemKind.WORKLOAD, "web"), 2)
        assert is_log_view(Item(ItemKind.INSTANCE, "web-1"), 1)
        assert not is_log_view(Item(ItemKind.WORKLOAD, "web"), 1)
        assert not is_log_view(Item(ItemKind.SECRET, "s"), 1)


class TestFilters:
    """Tests for filter_lines and filter_suggestions."""

    def test_filter_lines_case_insensitive(self) -> None:
        assert filter_lines("alpha\nBeta\ngamma", "b") == "Beta"

    def test_filter_lines_literal(self) -> None:
        assert filter_lines("a.b\naxb", "a.b") == "a.b"

    def test_filter_lines_no_match(self) -> None:
        assert filter_lines("alpha", "zzz") == ""

    def test_suggestions(self) -> None:
        names = ["api", "web", "web-admin", "worker"]
        assert filter_suggestions(names, "WE", exclude=["web"]) == ["web-admin"]

    def test_suggestions_capped(self) -> None:
        names = [f"svc-{i}" for i in range(10)]
        assert len(filter_suggestions(names, "svc")) == 5


# =============================================================================
# Presenter
# =============================================================================


@pytest.fixture
def screen() -> MagicMock:
    return MagicMock()


@pytest.fixture
def presenter(screen: MagicMock, fake_client: MagicMock) -> DeckPresenter:
    targets = TargetSet(["web"])
    state_cache = StateCache()
    return DeckPresenter(
        screen,
        TopologyController(fake_client),
        CommandExecutor(fake_client, targets, state_cache),
        targets,
        state_cache,
        MultiContainerCache(),
    )


def posted(screen: MagicMock) -> list[Any]:
    return [call.args[0] for call in screen.post_message.call_args_list]


class TestPresenterState:
    """Tests for DeckPresenter selection state."""

    def test_apply_topology_keeps_selection(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(8)
        presenter.tab = 1
        reordered = (ITEMS[3], ITEMS[8], *ITEMS[:3])
        presenter.apply_topology(FetchResult(items=reordered))
        assert presenter.current_item == ITEMS[8]
        assert presenter.cursor == 1
        assert presenter.tab == 1

    def test_apply_topology_resets_tab_when_item_lost(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(8)
        presenter.tab = 1
        presenter.apply_topology(FetchResult(items=ITEMS[:3]))
        assert presenter.cursor == 2
        assert presenter.tab == 0

    def test_apply_topology_keeps_shared_config_in_group(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=SHARED_CONFIG))
        presenter.select(5)
        presenter.apply_topology(FetchResult(items=SHARED_CONFIG))
        assert presenter.cursor == 5
        assert presenter.current_workload == "web"

    def test_apply_topology_records_error(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS, errors={"web": "boom"}))
        assert presenter.last_error == "web: boom"
        presenter.apply_topology(FetchResult(items=ITEMS))
        assert presenter.last_error is None

    def test_select(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.tab = 2
        assert presenter.select(4) is True
        assert presenter.tab == 0
        assert presenter.current_workload == "web"
        assert presenter.select(4) is False
        assert presenter.select(100) is False

    def test_cycle_tab(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(1)
        presenter.cycle_tab()
        presenter.cycle_tab()
        assert presenter.tab == 2
        presenter.cycle_tab()
        assert presenter.tab == 0

    def test_jump(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        assert presenter.jump("4") is True
        assert presenter.current_item == Item(ItemKind.SECRET, "web-secret", "Ref")
        assert presenter.jump("9") is False


class TestPresenterWorkers:
    """Tests for DeckPresenter worker coroutines."""

    @pytest.mark.asyncio
    async def test_load_topology_merges_cache(
        self, presenter: DeckPresenter, screen: MagicMock
    ) -> None:
        await presenter.load_topology()
        (message,) = posted(screen)
        assert isinstance(message, TopologyLoaded)
        assert isinstance(message.data, FetchResult)
        assert presenter.state_cache.get_selector("web") == "app=web"

    @pytest.mark.asyncio
    async def test_load_topology_failure(
        self, presenter: DeckPresenter, screen: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def explode(*args: Any, **kwargs: Any) -> FetchResult:
            raise RuntimeError("no cluster")

        monkeypatch.setattr(presenter._controller, "fetch_all", explode)
        await presenter.load_topology()
        (message,) = posted(screen)
        assert isinstance(message, TopologyLoadFailed)
        assert message.error == "no cluster"

    @pytest.mark.asyncio
    async def test_load_details(self, presenter: DeckPresenter, screen: MagicMock) -> None:
        item = Item(ItemKind.INSTANCE, "web-1")
        await presenter.load_details(item, 0)
        (message,) = posted(screen)
        assert isinstance(message, DetailsLoaded)
        assert message.item == item
        assert message.details.content == "kind: Pod\n"

    @pytest.mark.asyncio
    async def test_run_command_uses_selection(
        self, presenter: DeckPresenter, screen: MagicMock, fake_client: MagicMock
    ) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(8)
        await presenter.run_command("scale 2")
        fake_client.scale_workload.assert_awaited_once_with("web", 2)
        (message,) = posted(screen)
        assert isinstance(message, CommandFinished)
        assert message.result.success

    @pytest.mark.asyncio
    async def test_run_command_uses_cached_release(
        self, presenter: DeckPresenter, fake_client: MagicMock
    ) -> None:
        presenter.state_cache.merge(releases={"web": "web-release"})
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(5)
        await presenter.run_command("rollback 3")
        fake_client.rollback_release.assert_awaited_once_with("web-release", 3)

    @pytest.mark.asyncio
    async def test_run_command_on_header_targets_its_group(
        self, presenter: DeckPresenter, fake_client: MagicMock
    ) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(3)
        await presenter.run_command("scale 3")
        fake_client.scale_workload.assert_awaited_once_with("web", 3)

    @pytest.mark.asyncio
    async def test_remove_on_error_header_drops_failed_workload(
        self, screen: MagicMock, fake_client: MagicMock
    ) -> None:
        targets = TargetSet(["api", "broken"])
        state_cache = StateCache()
        presenter = DeckPresenter(
            screen,
            TopologyController(fake_client),
            CommandExecutor(fake_client, targets, state_cache),
            targets,
            state_cache,
            MultiContainerCache(),
        )
        presenter.apply_topology(FetchResult(items=WITH_FAILED))
        presenter.select(2)
        await presenter.run_command("remove")
        assert targets.snapshot() == ("api",)
        (message,) = posted(screen)
        assert message.result.message == "Removed broken"

    @pytest.mark.asyncio
    async def test_load_suggestions(
        self, presenter: DeckPresenter, screen: MagicMock, fake_client: MagicMock
    ) -> None:
        fake_client.list_workload_names.return_value = ["worker", "web", "api"]
        await presenter.load_suggestions()
        (message,) = posted(screen)
        assert isinstance(message, SuggestionsLoaded)
        assert message.names == ["api", "worker"]


class TestRenderDetails:
    """Tests for DeckPresenter.render_details."""

    def test_nothing_selected(self, presenter: DeckPresenter) -> None:
        rendered = presenter.render_details(Details(content="x"))
        assert isinstance(rendered, Text)
        assert presenter.plain_content == ""

    def test_error(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        rendered = presenter.render_details(Details(error="pod 'web-1' not found"))
        assert isinstance(rendered, Text)
        assert rendered.plain == "Error: pod 'web-1' not found"

    def test_structured_content_highlighted(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        rendered = presenter.render_details(
            Details(content="a: 1\r\n", is_structured=True, language="yaml")
        )
        assert isinstance(rendered, Syntax)
        assert presenter.plain_content == "a: 1\n"

    def test_filter(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.filter_text = "beta"
        rendered = presenter.render_details(Details(content="alpha\nBeta\ngamma"))
        assert isinstance(rendered, Text)
        assert rendered.plain == "Beta"
        assert presenter.plain_content == "Beta"

    def test_filter_without_matches(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.filter_text = "zzz"
        rendered = presenter.render_details(Details(content="alpha"))
        assert rendered.plain == "No results found for filter: zzz"

    def test_log_view_formatted(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(8)
        presenter.tab = 1
        rendered = presenter.render_details(Details(content="ERROR [db] down"))
        assert isinstance(rendered, Text)
        assert rendered.plain == "ERROR [db] down"
        assert presenter.plain_content == "ERROR [db] down"

    def test_log_view_raw(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.select(8)
        presenter.tab = 1
        presenter.format_mode = False
        rendered = presenter.render_details(Details(content="[bold]not markup[/]"))
        assert rendered.plain == "[bold]not markup[/]"

    def test_reuses_last_details(self, presenter: DeckPresenter) -> None:
        presenter.apply_topology(FetchResult(items=ITEMS))
        presenter.render_details(Details(content="one\ntwo"))
        presenter.filter_text = "two"
        assert presenter.render_details().plain == "two"

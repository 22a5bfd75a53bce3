"""Main application class for KubeDeck TUI."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from kubedeck.constants import APP_TITLE, THEME_DEFAULT
from kubedeck.controllers.commands.executor import CommandExecutor
from kubedeck.controllers.kube.client import KubectlClient
from kubedeck.controllers.topology.controller import TopologyController
from kubedeck.keyboard.app import APP_BINDINGS
from kubedeck.models.cache.multi_container_cache import MultiContainerCache
from kubedeck.models.cache.state_cache import StateCache
from kubedeck.models.state.app_settings import AppSettings
from kubedeck.models.state.session import Session
from kubedeck.models.state.targets import TargetSet
from kubedeck.screens.deck import DeckPresenter, DeckScreen

logger = logging.getLogger(__name__)


class KubeDeckApp(App[None]):
    """Main TUI application for KubeDeck."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings,
        client: KubectlClient | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings
        self.session = Session(context=settings.context, namespace=settings.namespace)
        self.client = client or KubectlClient(
            self.session,
            read_timeout=settings.read_timeout,
            command_timeout=settings.command_timeout,
        )
        self.targets = TargetSet(settings.targets)
        self.state_cache = StateCache()
        self.multi_container_cache = MultiContainerCache()
        self.controller = TopologyController(
            self.client,
            log_tail_lines=settings.log_tail_lines,
            workload_log_tail_lines=settings.workload_log_tail_lines,
        )
        self.executor = CommandExecutor(self.client, self.targets, self.state_cache)
        self.sub_title = f"{self.session.context or 'current context'} / {self.session.namespace}"
        self._apply_theme()

    def _apply_theme(self) -> None:
        """Apply the stored theme, falling back to the default for unknown names."""
        theme_name = str(self.settings.theme or "").strip()
        if theme_name not in self.available_themes:
            logger.warning("Unknown theme %r, using %s", theme_name, THEME_DEFAULT)
            theme_name = THEME_DEFAULT
        self.settings.theme = theme_name
        self.theme = theme_name

    def _build_presenter(self, screen: DeckScreen) -> DeckPresenter:
        return DeckPresenter(
            screen,
            self.controller,
            self.executor,
            self.targets,
            self.state_cache,
            self.multi_container_cache,
            format_mode=self.settings.log_format_mode,
        )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        context_label = f"{self.session.context or '-'} | {self.session.namespace}"
        self.push_screen(
            DeckScreen(
                self._build_presenter,
                context_label=context_label,
                refresh_interval=self.settings.refresh_interval,
            )
        )

"""Session-lifetime layout and authentication context shared by every page."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal

import structlog

from .core.config import Settings
from .utils.logging_config import redact

logger = structlog.get_logger()

MenuMode = Literal["static", "overlay", "slim", "slim-plus", "horizontal", "reveal", "drawer"]

# Viewports wider than this are treated as desktop.
DESKTOP_MIN_WIDTH = 991


@dataclass(frozen=True)
class LayoutConfig:
    ripple: bool = True
    input_style: str = "outlined"
    menu_mode: MenuMode = "static"
    menu_theme: str = "colorScheme"
    color_scheme: str = "light"
    theme: str = "green"
    scale: int = 14


@dataclass
class LayoutState:
    static_menu_desktop_inactive: bool = False
    overlay_menu_active: bool = False
    overlay_submenu_active: bool = False
    profile_sidebar_visible: bool = False
    config_sidebar_visible: bool = False
    static_menu_mobile_active: bool = False
    menu_hover_active: bool = False
    reset_menu: bool = False
    sidebar_active: bool = False
    anchored: bool = False


@dataclass(frozen=True)
class Breadcrumb:
    labels: tuple[str, ...] = ()
    to: str | None = None


@dataclass
class LayoutContext:
    """Access token plus layout preferences.

    Built once per session and handed to hooks and pages explicitly. Hooks only
    read ``access_token``; it is never reassigned after construction.
    """

    access_token: str = ""
    app_title: str = "Food Trace Admin"
    layout_config: LayoutConfig = field(default_factory=LayoutConfig)
    layout_state: LayoutState = field(default_factory=LayoutState)
    breadcrumbs: list[Breadcrumb] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Settings) -> LayoutContext:
        token = settings.auth.token
        if token:
            logger.info("access_token_loaded", token=redact(token))
        else:
            logger.warning("access_token_missing")
        return cls(access_token=token, app_title=settings.app_name)

    def set_layout_config(self, **changes: object) -> None:
        self.layout_config = replace(self.layout_config, **changes)

    def set_breadcrumbs(self, breadcrumbs: list[Breadcrumb]) -> None:
        self.breadcrumbs = list(breadcrumbs)

    def is_overlay(self) -> bool:
        return self.layout_config.menu_mode == "overlay"

    def is_slim(self) -> bool:
        return self.layout_config.menu_mode == "slim"

    def is_slim_plus(self) -> bool:
        return self.layout_config.menu_mode == "slim-plus"

    def is_horizontal(self) -> bool:
        return self.layout_config.menu_mode == "horizontal"

    @staticmethod
    def is_desktop(viewport_width: int) -> bool:
        return viewport_width > DESKTOP_MIN_WIDTH

    def on_menu_toggle(self, viewport_width: int) -> None:
        """Toggle the menu the way the current mode and viewport require."""
        state = self.layout_state
        if self.is_overlay():
            state.overlay_menu_active = not state.overlay_menu_active

        if self.is_desktop(viewport_width):
            state.static_menu_desktop_inactive = not state.static_menu_desktop_inactive
        else:
            state.static_menu_mobile_active = not state.static_menu_mobile_active

    def show_config_sidebar(self) -> None:
        self.layout_state.config_sidebar_visible = True

    def show_profile_sidebar(self) -> None:
        self.layout_state.profile_sidebar_visible = not self.layout_state.profile_sidebar_visible

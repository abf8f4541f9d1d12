"""Translation of navigation requests into the platform intent shape."""

from dataclasses import dataclass, field

from navtabs.constants import (
    ACTION_VIEW,
    DEFAULT_DEDICATED_PACKAGE,
    EXTRA_CLOSE_BUTTON_ICON,
    EXTRA_DEFAULT_SHARE_MENU_ITEM,
    EXTRA_EXIT_ANIMATION_BUNDLE,
    EXTRA_SESSION,
    EXTRA_TITLE_VISIBILITY_STATE,
    EXTRA_TOOLBAR_COLOR,
    NO_TITLE,
    SHOW_PAGE_TITLE,
)
from navtabs.tabs.navigation import DedicatedEngine, NavigationRequest


@dataclass(frozen=True)
class Intent:
    action: str
    data: str
    package: str | None = None
    extras: dict = field(default_factory=dict)


def title_visibility(show_title: bool) -> int:
    return SHOW_PAGE_TITLE if show_title else NO_TITLE


def build_intent(request: NavigationRequest, package: str = DEFAULT_DEDICATED_PACKAGE) -> Intent:
    engine = request.engine
    if not isinstance(engine, DedicatedEngine):
        return Intent(action=ACTION_VIEW, data=request.target_address)

    options = engine.options
    extras = {
        EXTRA_SESSION: None,
        EXTRA_CLOSE_BUTTON_ICON: options.close_icon,
        EXTRA_TOOLBAR_COLOR: options.toolbar_color if options.toolbar_color is not None else 0,
        EXTRA_TITLE_VISIBILITY_STATE: title_visibility(options.show_title),
        EXTRA_EXIT_ANIMATION_BUNDLE: options.exit_transition,
        EXTRA_DEFAULT_SHARE_MENU_ITEM: options.show_share_action,
    }
    return Intent(action=ACTION_VIEW, data=request.target_address, package=package, extras=extras)


__all__ = ["Intent", "build_intent", "title_visibility"]

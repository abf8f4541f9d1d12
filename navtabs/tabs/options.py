import logging
from dataclasses import dataclass
from typing import Any

from navtabs.tabs.animations import (
    PRESET_ANIMATIONS,
    AnimationCatalog,
    AnimationPreset,
    Transition,
    coerce_preset,
)
from navtabs.tabs.colors import PaletteResourceResolver, parse_color
from navtabs.tabs.errors import InvalidResourceError, ResolutionError
from navtabs.tabs.ports import AnimationResolver, ResourceResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabOptions:
    """Finalized display options for one navigation.

    ``None`` transitions mean the host default animation is used.
    """

    toolbar_color: int | None = None
    show_title: bool = False
    close_icon: Any = None
    start_transition: Transition | None = None
    exit_transition: Transition | None = None
    show_share_action: bool = False
    animation_preset: AnimationPreset = AnimationPreset.SYSTEM


class TabOptionsBuilder:
    """Mutable accumulator for :class:`TabOptions`.

    Setters return the builder so calls can be chained; the last call for a
    field wins. ``build()`` may be called any number of times.
    """

    def __init__(
        self,
        resource_resolver: ResourceResolver | None = None,
        animation_resolver: AnimationResolver | None = None,
    ):
        self._resources = resource_resolver or PaletteResourceResolver()
        self._animations = animation_resolver or AnimationCatalog()
        self._toolbar_color = None
        self._show_title = False
        self._close_icon = None
        self._start_transition = None
        self._exit_transition = None
        self._show_share_action = False
        self._preset = AnimationPreset.SYSTEM

    @classmethod
    def from_config(cls, config, animation_resolver: AnimationResolver | None = None) -> "TabOptionsBuilder":
        """Builder whose color resources come from the settings palette."""
        palette = PaletteResourceResolver(config.get("color_palette") or {})
        return cls(resource_resolver=palette, animation_resolver=animation_resolver)

    def set_toolbar_color(self, color) -> "TabOptionsBuilder":
        self._toolbar_color = parse_color(color)
        return self

    def set_toolbar_color_resource(self, ref: str) -> "TabOptionsBuilder":
        try:
            color = self._resources.resolve(ref)
        except InvalidResourceError:
            raise
        except Exception as exc:
            raise InvalidResourceError(f"Color resource {ref!r} could not be resolved: {exc}") from exc
        self._toolbar_color = parse_color(color)
        return self

    def set_show_title(self, show_title: bool) -> "TabOptionsBuilder":
        self._show_title = bool(show_title)
        return self

    def set_close_icon(self, icon) -> "TabOptionsBuilder":
        self._close_icon = icon
        return self

    def set_start_transition(self, enter_ref: str, exit_ref: str) -> "TabOptionsBuilder":
        self._start_transition = self._resolve_transition(enter_ref, exit_ref)
        return self

    def set_exit_transition(self, enter_ref: str, exit_ref: str) -> "TabOptionsBuilder":
        self._exit_transition = self._resolve_transition(enter_ref, exit_ref)
        return self

    def set_show_share_action(self, show_share_action: bool) -> "TabOptionsBuilder":
        self._show_share_action = bool(show_share_action)
        return self

    def apply_animation_preset(self, preset: AnimationPreset) -> "TabOptionsBuilder":
        preset = coerce_preset(preset)
        self._preset = preset
        if preset == AnimationPreset.SYSTEM:
            self._start_transition = None
            self._exit_transition = None
            return self

        if preset == AnimationPreset.NONE:
            # Zero animations need no lookup.
            self._start_transition = Transition.none()
            self._exit_transition = Transition.none()
            return self

        start_pair, finish_pair = PRESET_ANIMATIONS[preset]
        self._start_transition = self._resolve_transition(*start_pair)
        self._exit_transition = self._resolve_transition(*finish_pair)
        return self

    def build(self) -> TabOptions:
        return TabOptions(
            toolbar_color=self._toolbar_color,
            show_title=self._show_title,
            close_icon=self._close_icon,
            start_transition=self._start_transition,
            exit_transition=self._exit_transition,
            show_share_action=self._show_share_action,
            animation_preset=self._preset,
        )

    def _resolve_transition(self, enter_ref, exit_ref):
        try:
            return self._animations.resolve(enter_ref, exit_ref)
        except ResolutionError as exc:
            # A missing animation is cosmetic; fall back to the host default.
            logger.warning("Animation lookup failed, using host default: %s", exc)
            return None


__all__ = ["TabOptions", "TabOptionsBuilder"]

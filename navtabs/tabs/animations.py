from dataclasses import dataclass
from enum import Enum

from navtabs.errors import ValidationError
from navtabs.tabs.errors import ResolutionError


NO_ANIMATION = "none"


class AnimationPreset(str, Enum):
    SYSTEM = "SYSTEM"
    NONE = "NONE"
    HORIZONTAL_LEFT = "HORIZONTAL_LEFT"
    HORIZONTAL_RIGHT = "HORIZONTAL_RIGHT"
    VERTICAL_TOP = "VERTICAL_TOP"
    VERTICAL_BOTTOM = "VERTICAL_BOTTOM"


@dataclass(frozen=True)
class Transition:
    """Resolved enter/exit animation pair."""

    enter: str
    exit: str

    @classmethod
    def none(cls) -> "Transition":
        return cls(enter=NO_ANIMATION, exit=NO_ANIMATION)

    @property
    def is_neutral(self) -> bool:
        return self.enter == NO_ANIMATION and self.exit == NO_ANIMATION


# (start enter, start exit), (finish enter, finish exit); SYSTEM has no entry.
PRESET_ANIMATIONS = {
    AnimationPreset.HORIZONTAL_RIGHT: (
        ("horizontal_right_start_enter", "horizontal_right_start_exit"),
        ("horizontal_right_finish_enter", "horizontal_right_finish_exit"),
    ),
    AnimationPreset.HORIZONTAL_LEFT: (
        ("horizontal_left_start_enter", "horizontal_left_start_exit"),
        ("horizontal_left_finish_enter", "horizontal_left_finish_exit"),
    ),
    AnimationPreset.VERTICAL_BOTTOM: (
        ("vertical_bottom_start_enter", "fade_out"),
        ("fade_in", "vertical_bottom_finish_exit"),
    ),
    AnimationPreset.VERTICAL_TOP: (
        ("vertical_top_start_enter", "fade_out"),
        ("fade_in", "vertical_top_finish_exit"),
    ),
    AnimationPreset.NONE: (
        (NO_ANIMATION, NO_ANIMATION),
        (NO_ANIMATION, NO_ANIMATION),
    ),
}


def coerce_preset(value) -> AnimationPreset:
    if isinstance(value, AnimationPreset):
        return value
    try:
        return AnimationPreset(str(value or "").strip().upper())
    except ValueError as exc:
        raise ValidationError(f"Unknown animation preset: {value!r}") from exc


def _stock_animation_names() -> set:
    names = {NO_ANIMATION}
    for start_pair, finish_pair in PRESET_ANIMATIONS.values():
        names.update(start_pair)
        names.update(finish_pair)
    return names


class AnimationCatalog:
    """Animation resolver backed by a set of known animation names.

    Ships with the stock animations used by the presets; hosts can register
    their own names on top.
    """

    def __init__(self, extra_names=()):
        self._names = _stock_animation_names()
        self._names.update(extra_names)

    def register(self, *names: str) -> None:
        for name in names:
            normalized = (name or "").strip()
            if not normalized:
                raise ValueError("Animation name cannot be empty.")
            self._names.add(normalized)

    def __contains__(self, name) -> bool:
        return name in self._names

    def resolve(self, enter_ref: str, exit_ref: str) -> Transition:
        missing = [ref for ref in (enter_ref, exit_ref) if ref not in self._names]
        if missing:
            raise ResolutionError(f"Unknown animation reference: {', '.join(map(str, missing))}")
        return Transition(enter=enter_ref, exit=exit_ref)


__all__ = [
    "AnimationCatalog",
    "AnimationPreset",
    "NO_ANIMATION",
    "PRESET_ANIMATIONS",
    "Transition",
    "coerce_preset",
]

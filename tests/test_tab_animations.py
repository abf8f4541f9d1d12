import pytest

from navtabs.errors import ValidationError
from navtabs.tabs.animations import (
    NO_ANIMATION,
    PRESET_ANIMATIONS,
    AnimationCatalog,
    AnimationPreset,
    Transition,
    coerce_preset,
)
from navtabs.tabs.errors import ResolutionError


def test_catalog_knows_every_preset_animation():
    catalog = AnimationCatalog()
    for start_pair, finish_pair in PRESET_ANIMATIONS.values():
        assert catalog.resolve(*start_pair) == Transition(*start_pair)
        assert catalog.resolve(*finish_pair) == Transition(*finish_pair)


def test_catalog_rejects_unknown_reference():
    with pytest.raises(ResolutionError) as excinfo:
        AnimationCatalog().resolve("fade_in", "spin_out")
    assert "spin_out" in str(excinfo.value)


def test_catalog_register_adds_names():
    catalog = AnimationCatalog()
    catalog.register("spin_in", "spin_out")
    assert "spin_in" in catalog
    assert catalog.resolve("spin_in", "spin_out") == Transition("spin_in", "spin_out")


def test_catalog_register_rejects_blank_names():
    with pytest.raises(ValueError):
        AnimationCatalog().register("  ")


def test_system_preset_has_no_animation_pairs():
    assert AnimationPreset.SYSTEM not in PRESET_ANIMATIONS
    assert set(PRESET_ANIMATIONS) == set(AnimationPreset) - {AnimationPreset.SYSTEM}


def test_neutral_transition():
    neutral = Transition.none()
    assert neutral.enter == NO_ANIMATION
    assert neutral.exit == NO_ANIMATION
    assert neutral.is_neutral is True
    assert Transition("fade_in", "fade_out").is_neutral is False


def test_coerce_preset():
    assert coerce_preset(AnimationPreset.NONE) is AnimationPreset.NONE
    assert coerce_preset(" horizontal_right ") is AnimationPreset.HORIZONTAL_RIGHT
    with pytest.raises(ValidationError):
        coerce_preset("diagonal")

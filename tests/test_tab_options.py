import logging

import pytest

from navtabs.errors import ValidationError
from navtabs.tabs.animations import AnimationCatalog, AnimationPreset, Transition
from navtabs.tabs.colors import PaletteResourceResolver
from navtabs.tabs.errors import InvalidResourceError, ResolutionError
from navtabs.tabs.options import TabOptions, TabOptionsBuilder


class _BrokenAnimations:
    def resolve(self, enter_ref, exit_ref):
        raise ResolutionError(f"missing {enter_ref}")


def test_default_build_is_valid():
    options = TabOptionsBuilder().build()
    assert options == TabOptions()
    assert options.toolbar_color is None
    assert options.show_title is False
    assert options.close_icon is None
    assert options.start_transition is None
    assert options.exit_transition is None
    assert options.show_share_action is False
    assert options.animation_preset == AnimationPreset.SYSTEM


def test_build_is_repeatable_and_independent():
    builder = TabOptionsBuilder().set_show_title(True).set_toolbar_color("#3F51B5")
    first = builder.build()
    second = builder.build()
    assert first == second
    assert first is not second

    builder.set_show_title(False)
    assert first.show_title is True
    assert builder.build().show_title is False


def test_options_are_frozen():
    options = TabOptionsBuilder().build()
    with pytest.raises(AttributeError):
        options.show_title = True


def test_setters_chain_and_last_call_wins():
    icon = object()
    options = (
        TabOptionsBuilder()
        .set_toolbar_color(0xFF000000)
        .set_toolbar_color("#3F51B5")
        .set_show_title(True)
        .set_close_icon(icon)
        .set_show_share_action(True)
        .build()
    )
    assert options.toolbar_color == 0xFF3F51B5
    assert options.show_title is True
    assert options.close_icon is icon
    assert options.show_share_action is True


def test_invalid_toolbar_color_raises():
    with pytest.raises(InvalidResourceError):
        TabOptionsBuilder().set_toolbar_color("definitely-not-a-color")


def test_toolbar_color_resource_resolves_from_palette():
    builder = TabOptionsBuilder(resource_resolver=PaletteResourceResolver({"primary": "#FF5722"}))
    options = builder.set_toolbar_color_resource("@color/primary").build()
    assert options.toolbar_color == 0xFFFF5722


def test_unknown_color_resource_raises():
    with pytest.raises(InvalidResourceError):
        TabOptionsBuilder().set_toolbar_color_resource("@color/missing")


def test_resource_resolver_failure_is_wrapped():
    class _ExplodingResolver:
        def resolve(self, ref):
            raise KeyError(ref)

    with pytest.raises(InvalidResourceError):
        TabOptionsBuilder(resource_resolver=_ExplodingResolver()).set_toolbar_color_resource("primary")


def test_custom_transitions_resolve_through_catalog():
    catalog = AnimationCatalog(extra_names={"slide_in", "slide_out"})
    options = (
        TabOptionsBuilder(animation_resolver=catalog)
        .set_start_transition("slide_in", "slide_out")
        .set_exit_transition("fade_in", "fade_out")
        .build()
    )
    assert options.start_transition == Transition("slide_in", "slide_out")
    assert options.exit_transition == Transition("fade_in", "fade_out")


def test_unresolvable_transition_degrades_to_host_default(caplog):
    builder = TabOptionsBuilder(animation_resolver=_BrokenAnimations())
    with caplog.at_level(logging.WARNING):
        options = builder.set_start_transition("a", "b").set_exit_transition("c", "d").build()
    assert options.start_transition is None
    assert options.exit_transition is None
    assert "host default" in caplog.text


def test_unresolvable_transition_clears_previous_value():
    builder = TabOptionsBuilder().apply_animation_preset(AnimationPreset.HORIZONTAL_LEFT)
    builder.set_start_transition("nope_enter", "nope_exit")
    assert builder.build().start_transition is None
    assert builder.build().exit_transition is not None


@pytest.mark.parametrize(
    "preset",
    [
        AnimationPreset.NONE,
        AnimationPreset.HORIZONTAL_LEFT,
        AnimationPreset.HORIZONTAL_RIGHT,
        AnimationPreset.VERTICAL_TOP,
        AnimationPreset.VERTICAL_BOTTOM,
    ],
)
def test_system_preset_overrides_everything(preset):
    options = (
        TabOptionsBuilder()
        .set_start_transition("fade_in", "fade_out")
        .apply_animation_preset(preset)
        .set_exit_transition("fade_in", "fade_out")
        .apply_animation_preset(AnimationPreset.SYSTEM)
        .build()
    )
    assert options.start_transition is None
    assert options.exit_transition is None
    assert options.animation_preset == AnimationPreset.SYSTEM


def test_none_preset_is_neutral_not_host_default():
    options = TabOptionsBuilder().apply_animation_preset(AnimationPreset.NONE).build()
    assert options.start_transition == Transition.none()
    assert options.exit_transition == Transition.none()
    assert options.start_transition is not None
    assert options.start_transition.is_neutral


def test_vertical_bottom_preset_pairs():
    options = TabOptionsBuilder().apply_animation_preset(AnimationPreset.VERTICAL_BOTTOM).build()
    assert options.start_transition == Transition("vertical_bottom_start_enter", "fade_out")
    assert options.exit_transition == Transition("fade_in", "vertical_bottom_finish_exit")


def test_direct_transition_after_preset_wins():
    options = (
        TabOptionsBuilder()
        .apply_animation_preset(AnimationPreset.HORIZONTAL_RIGHT)
        .set_start_transition("fade_in", "fade_out")
        .build()
    )
    assert options.start_transition == Transition("fade_in", "fade_out")
    assert options.exit_transition == Transition("horizontal_right_finish_enter", "horizontal_right_finish_exit")


def test_preset_accepts_name_string():
    options = TabOptionsBuilder().apply_animation_preset("vertical_top").build()
    assert options.animation_preset == AnimationPreset.VERTICAL_TOP
    assert options.start_transition == Transition("vertical_top_start_enter", "fade_out")


def test_none_preset_skips_host_animation_lookup():
    class _HostAnimations:
        def resolve(self, enter_ref, exit_ref):
            if enter_ref == "none" or exit_ref == "none":
                raise ResolutionError("no such animation")
            return Transition(enter_ref, exit_ref)

    builder = TabOptionsBuilder(animation_resolver=_HostAnimations())
    options = builder.apply_animation_preset(AnimationPreset.NONE).build()
    assert options.start_transition == Transition.none()
    assert options.exit_transition == Transition.none()


def test_unknown_preset_is_a_validation_error():
    builder = TabOptionsBuilder().apply_animation_preset(AnimationPreset.HORIZONTAL_LEFT)
    with pytest.raises(ValidationError):
        builder.apply_animation_preset("diagonal")
    assert builder.build().animation_preset == AnimationPreset.HORIZONTAL_LEFT


def test_from_config_resolves_colors_from_palette():
    config = {"color_palette": {"brand": "#112233"}}
    options = TabOptionsBuilder.from_config(config).set_toolbar_color_resource("@color/brand").build()
    assert options.toolbar_color == 0xFF112233


def test_from_config_ignores_display_settings():
    config = {"show_title": True, "animation_preset": "HORIZONTAL_LEFT", "toolbar_color": "#112233"}
    assert TabOptionsBuilder.from_config(config).build() == TabOptions()

"""Custom tab configuration and dispatch."""

from navtabs.tabs.animations import AnimationCatalog, AnimationPreset, Transition
from navtabs.tabs.colors import PaletteResourceResolver, parse_color
from navtabs.tabs.errors import (
    CustomTabError,
    InvalidAddressError,
    InvalidResourceError,
    PlatformLaunchError,
    ResolutionError,
)
from navtabs.tabs.intent import Intent, build_intent
from navtabs.tabs.launcher import Launcher
from navtabs.tabs.navigation import DedicatedEngine, GenericFallback, NavigationRequest, parse_address
from navtabs.tabs.options import TabOptions, TabOptionsBuilder
from navtabs.tabs.ports import AnimationResolver, CapabilityProbe, PlatformDispatcher, ResourceResolver

__all__ = [
    "AnimationCatalog",
    "AnimationPreset",
    "AnimationResolver",
    "CapabilityProbe",
    "CustomTabError",
    "DedicatedEngine",
    "GenericFallback",
    "Intent",
    "InvalidAddressError",
    "InvalidResourceError",
    "Launcher",
    "NavigationRequest",
    "PaletteResourceResolver",
    "PlatformDispatcher",
    "PlatformLaunchError",
    "ResolutionError",
    "ResourceResolver",
    "TabOptions",
    "TabOptionsBuilder",
    "Transition",
    "build_intent",
    "parse_address",
    "parse_color",
]

"""Custom tab launching with a system browser fallback."""

from . import constants, errors, infra, paths, platform, services, tabs
from .services.navigation import build_launcher, open_url
from .tabs import AnimationPreset, Launcher, TabOptions, TabOptionsBuilder

__all__ = [
    "AnimationPreset",
    "Launcher",
    "TabOptions",
    "TabOptionsBuilder",
    "build_launcher",
    "constants",
    "errors",
    "infra",
    "open_url",
    "paths",
    "platform",
    "services",
    "tabs",
]

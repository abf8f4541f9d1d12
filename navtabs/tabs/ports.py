"""Boundary interfaces for the custom tab core.

Implementations are environment specific; the builder and launcher only
talk to these protocols so tests can swap in deterministic fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from navtabs.tabs.animations import Transition
    from navtabs.tabs.navigation import NavigationRequest


@runtime_checkable
class ResourceResolver(Protocol):
    """Resolves symbolic color references."""

    def resolve(self, ref: str) -> int:
        """Return an ARGB color or raise InvalidResourceError."""


@runtime_checkable
class AnimationResolver(Protocol):
    """Turns symbolic enter/exit animation references into a transition."""

    def resolve(self, enter_ref: str, exit_ref: str) -> "Transition":
        """Return a transition or raise ResolutionError."""


@runtime_checkable
class CapabilityProbe(Protocol):
    """Reports whether the dedicated browser engine is present."""

    def is_dedicated_engine_available(self) -> bool:
        """Return True when the dedicated engine can be used."""


@runtime_checkable
class PlatformDispatcher(Protocol):
    """Delivers a navigation request to the host platform."""

    def launch(self, request: "NavigationRequest", start_transition: "Transition | None") -> None:
        """Open the request; raise PlatformLaunchError on failure."""


__all__ = ["AnimationResolver", "CapabilityProbe", "PlatformDispatcher", "ResourceResolver"]

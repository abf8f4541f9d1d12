import logging

from navtabs.tabs.navigation import DedicatedEngine, GenericFallback, NavigationRequest, parse_address
from navtabs.tabs.options import TabOptions
from navtabs.tabs.ports import CapabilityProbe, PlatformDispatcher

logger = logging.getLogger(__name__)


class Launcher:
    """Turns a target address and tab options into one platform launch."""

    def __init__(self, probe: CapabilityProbe, dispatcher: PlatformDispatcher):
        self.probe = probe
        self.dispatcher = dispatcher

    def launch(self, target, options: TabOptions | None = None) -> NavigationRequest:
        address = parse_address(target)
        options = options or TabOptions()

        if self._dedicated_engine_available():
            request = NavigationRequest(target_address=address, engine=DedicatedEngine(options))
        else:
            request = NavigationRequest(target_address=address, engine=GenericFallback())

        logger.debug(
            "Launching %s via %s",
            address,
            "dedicated engine" if request.uses_dedicated_engine else "generic fallback",
        )
        self.dispatcher.launch(request, options.start_transition)
        return request

    def _dedicated_engine_available(self) -> bool:
        try:
            return bool(self.probe.is_dedicated_engine_available())
        except Exception as exc:
            logger.warning("Capability probe failed, using generic fallback: %s", exc)
            return False


__all__ = ["Launcher"]

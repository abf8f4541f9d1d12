"""Desktop adapters: Chrome app windows with a ``webbrowser`` fallback."""

import logging
import os
import shutil
import subprocess
import webbrowser

from navtabs.constants import DEFAULT_BROWSER_CANDIDATES, KNOWN_BROWSER_PATHS
from navtabs.tabs.errors import PlatformLaunchError
from navtabs.tabs.navigation import DedicatedEngine

logger = logging.getLogger(__name__)


def find_browser_executable(candidates=None, known_paths=None):
    env_paths = [shutil.which(name) for name in (candidates or DEFAULT_BROWSER_CANDIDATES)]
    hardcoded = KNOWN_BROWSER_PATHS if known_paths is None else known_paths
    for candidate in [*env_paths, *hardcoded]:
        if candidate and os.path.exists(candidate):
            return candidate
    return None


class ExecutableProbe:
    def __init__(self, candidates=None, known_paths=None):
        self.candidates = candidates
        self.known_paths = known_paths

    def is_dedicated_engine_available(self) -> bool:
        return find_browser_executable(self.candidates, self.known_paths) is not None


class DesktopDispatcher:
    """Opens dedicated-engine requests as a Chrome app window.

    Display options have no desktop counterpart and are not forwarded;
    start transitions are ignored.
    """

    def __init__(self, executable=None, candidates=None, opener=None):
        self.executable = executable
        self.candidates = candidates
        self.opener = opener or webbrowser.open

    def launch(self, request, start_transition) -> None:
        if isinstance(request.engine, DedicatedEngine):
            self._launch_app_window(request.target_address)
        else:
            self._launch_default_browser(request.target_address)

    def _launch_app_window(self, url):
        executable = self.executable or find_browser_executable(self.candidates)
        if not executable:
            raise PlatformLaunchError("Dedicated browser executable not found.")
        try:
            subprocess.Popen([executable, f"--app={url}"])
        except OSError as exc:
            raise PlatformLaunchError(f"Failed to launch {executable}: {exc}") from exc
        logger.debug("Opened %s in %s app window", url, executable)

    def _launch_default_browser(self, url):
        try:
            opened = self.opener(url)
        except webbrowser.Error as exc:
            raise PlatformLaunchError(f"Default browser failed: {exc}") from exc
        if not opened:
            raise PlatformLaunchError(f"No browser could open {url}")


__all__ = ["DesktopDispatcher", "ExecutableProbe", "find_browser_executable"]

"""Host platform adapters for probing and dispatching navigations."""

from navtabs.platform.adb import AdbDispatcher, AdbPackageProbe
from navtabs.platform.desktop import DesktopDispatcher, ExecutableProbe, find_browser_executable

__all__ = [
    "AdbDispatcher",
    "AdbPackageProbe",
    "DesktopDispatcher",
    "ExecutableProbe",
    "find_browser_executable",
]

from collections.abc import Callable

from navtabs.constants import DEFAULT_ADB_PATH, DEFAULT_DEDICATED_PACKAGE
from navtabs.errors import ValidationError
from navtabs.infra.config_store import Config
from navtabs.platform.adb import AdbDispatcher, AdbPackageProbe
from navtabs.platform.desktop import DesktopDispatcher, ExecutableProbe
from navtabs.tabs.launcher import Launcher
from navtabs.tabs.navigation import NavigationRequest
from navtabs.tabs.options import TabOptionsBuilder


def build_launcher(config=None) -> Launcher:
    """Wire the probe/dispatcher pair named by the ``platform`` setting."""
    if config is None:
        config = Config()
    platform = str(config.get("platform") or "").strip().lower()

    if platform == "adb":
        package = config.get("dedicated_package") or DEFAULT_DEDICATED_PACKAGE
        adb_path = config.get("adb_path") or DEFAULT_ADB_PATH
        serial = config.get("adb_serial")
        return Launcher(
            probe=AdbPackageProbe(package=package, adb_path=adb_path, serial=serial),
            dispatcher=AdbDispatcher(adb_path=adb_path, serial=serial, package=package),
        )

    if platform == "desktop":
        candidates = config.get("browser_candidates")
        return Launcher(
            probe=ExecutableProbe(candidates=candidates),
            dispatcher=DesktopDispatcher(candidates=candidates),
        )

    raise ValidationError(f"Unknown launch platform: {platform or '(empty)'}")


def open_url(
    url,
    configure: Callable[[TabOptionsBuilder], object] | None = None,
    *,
    config=None,
    launcher: Launcher | None = None,
) -> NavigationRequest:
    """Open ``url`` in a custom tab.

    ``configure`` receives a fresh builder (color resources resolved from
    the settings palette) and sets the display options for this call.
    """
    if config is None:
        config = Config()
    builder = TabOptionsBuilder.from_config(config)
    if configure is not None:
        configure(builder)
    launcher = launcher or build_launcher(config)
    return launcher.launch(url, builder.build())


__all__ = ["build_launcher", "open_url"]

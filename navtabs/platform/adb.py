"""Android device adapters driven through ``adb``."""

import logging
import shlex
import subprocess

from navtabs.constants import ADB_TIMEOUT_SEC, DEFAULT_ADB_PATH, DEFAULT_DEDICATED_PACKAGE, EXTRA_SESSION
from navtabs.errors import ExternalServiceError
from navtabs.tabs.errors import PlatformLaunchError
from navtabs.tabs.intent import build_intent

logger = logging.getLogger(__name__)


def _adb_base(adb_path, serial):
    args = [adb_path or DEFAULT_ADB_PATH]
    if serial:
        args += ["-s", serial]
    return args


def _to_int32(value: int) -> int:
    # am parses --ei as a signed 32-bit int; ARGB colors with alpha overflow it.
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def extra_args(extras: dict) -> list:
    args = []
    for key, value in extras.items():
        if value is None:
            # Only the session marker is meaningful as a null extra.
            if key == EXTRA_SESSION:
                args += ["--esn", key]
        elif isinstance(value, bool):
            args += ["--ez", key, "true" if value else "false"]
        elif isinstance(value, int):
            args += ["--ei", key, str(_to_int32(value))]
        elif isinstance(value, str):
            args += ["--es", key, value]
        else:
            logger.debug("Skipping extra %s: %s cannot be sent over adb", key, type(value).__name__)
    return args


class AdbPackageProbe:
    """Checks whether the dedicated engine package is installed on a device."""

    def __init__(self, package=DEFAULT_DEDICATED_PACKAGE, adb_path=DEFAULT_ADB_PATH, serial=None):
        self.package = package
        self.adb_path = adb_path
        self.serial = serial

    def is_dedicated_engine_available(self) -> bool:
        args = _adb_base(self.adb_path, self.serial) + ["shell", "pm", "list", "packages", self.package]
        try:
            proc = subprocess.run(args, capture_output=True, text=True, timeout=ADB_TIMEOUT_SEC)
        except (OSError, subprocess.SubprocessError) as exc:
            raise ExternalServiceError(f"adb package query failed: {exc}") from exc
        if proc.returncode != 0:
            raise ExternalServiceError(f"adb package query failed: {(proc.stderr or '').strip()}")

        expected = f"package:{self.package}"
        return any(line.strip() == expected for line in (proc.stdout or "").splitlines())


class AdbDispatcher:
    """Starts the navigation intent on a device with ``am start``."""

    def __init__(self, adb_path=DEFAULT_ADB_PATH, serial=None, package=DEFAULT_DEDICATED_PACKAGE):
        self.adb_path = adb_path
        self.serial = serial
        self.package = package

    def command_for(self, request) -> list:
        intent = build_intent(request, package=self.package)
        am_args = ["am", "start", "-a", intent.action, "-d", intent.data]
        if intent.package:
            am_args += ["-p", intent.package]
        am_args += extra_args(intent.extras)
        # adb joins shell arguments and hands them to the device shell.
        return _adb_base(self.adb_path, self.serial) + ["shell", shlex.join(am_args)]

    def launch(self, request, start_transition) -> None:
        if start_transition is not None:
            logger.debug("Start transition %s is not supported over adb", start_transition)

        args = self.command_for(request)
        try:
            proc = subprocess.run(args, capture_output=True, text=True, timeout=ADB_TIMEOUT_SEC)
        except (OSError, subprocess.SubprocessError) as exc:
            raise PlatformLaunchError(f"Could not run adb: {exc}") from exc

        output = f"{proc.stdout or ''}\n{proc.stderr or ''}"
        failed_lines = [line for line in output.splitlines() if line.strip().startswith("Error")]
        if proc.returncode != 0 or failed_lines:
            raise PlatformLaunchError(f"am start failed: {output.strip()}")


__all__ = ["AdbDispatcher", "AdbPackageProbe", "extra_args"]

import copy
import json
import logging
import os

from navtabs.constants import DEFAULT_ADB_PATH, DEFAULT_BROWSER_CANDIDATES, DEFAULT_DEDICATED_PACKAGE
from navtabs.errors import ValidationError
from navtabs.paths import CONFIG_FILE

logger = logging.getLogger(__name__)

SETTINGS_DEFAULTS = {
    "platform": "desktop",
    "dedicated_package": DEFAULT_DEDICATED_PACKAGE,
    "adb_path": DEFAULT_ADB_PATH,
    "adb_serial": None,
    "browser_candidates": list(DEFAULT_BROWSER_CANDIDATES),
    "color_palette": {},
}


def _read_settings(path) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        saved = json.load(f)
    if not isinstance(saved, dict):
        raise ValueError("Config payload must be a JSON object.")
    return saved


class Config:
    """Launch wiring settings: target platform, adb access, browser lookup
    and the color palette used for ``@color/`` references.

    Display options are never stored here; every navigation builds its own.
    """

    def __init__(self, path=None):
        self.path = path or CONFIG_FILE
        self.load_error = None
        self.data = copy.deepcopy(SETTINGS_DEFAULTS)
        self.load()

    def load(self):
        self.load_error = None
        try:
            saved = _read_settings(self.path)
        except (OSError, TypeError, ValueError) as exc:
            self.load_error = str(exc)
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            return

        unknown = sorted(key for key in saved if key not in SETTINGS_DEFAULTS)
        if unknown:
            logger.warning("Ignoring unknown settings in %s: %s", self.path, ", ".join(unknown))
        self.data.update((key, value) for key, value in saved.items() if key in SETTINGS_DEFAULTS)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        if key not in SETTINGS_DEFAULTS:
            raise ValidationError(f"Unknown setting: {key}")
        self.data[key] = value
        self.save()

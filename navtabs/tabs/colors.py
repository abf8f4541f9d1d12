from PySide6.QtGui import QColor

from navtabs.tabs.errors import InvalidResourceError


MAX_ARGB = 0xFFFFFFFF
RESOURCE_PREFIX = "@color/"


def parse_color(value) -> int:
    """Normalize a color value to a 32-bit ARGB integer.

    Accepts an ARGB int, an ``(r, g, b[, a])`` tuple or any color string Qt
    understands (``#RGB``, ``#RRGGBB``, ``#AARRGGBB``, SVG color names).
    """
    if isinstance(value, bool):
        raise InvalidResourceError(f"Invalid color value: {value!r}")

    if isinstance(value, int):
        if not 0 <= value <= MAX_ARGB:
            raise InvalidResourceError(f"Color out of ARGB range: {value:#x}")
        return value

    if isinstance(value, (tuple, list)):
        if len(value) not in (3, 4) or not all(
            isinstance(part, int) and not isinstance(part, bool) and 0 <= part <= 255 for part in value
        ):
            raise InvalidResourceError(f"Invalid color components: {value!r}")
        return QColor(*value).rgba()

    if isinstance(value, str):
        normalized = value.strip()
        color = QColor(normalized) if normalized else QColor()
        if not color.isValid():
            raise InvalidResourceError(f"Invalid color string: {value!r}")
        return color.rgba()

    raise InvalidResourceError(f"Unsupported color type: {type(value).__name__}")


def format_color(argb: int) -> str:
    return f"#{argb & MAX_ARGB:08X}"


class PaletteResourceResolver:
    """Resolves ``@color/name`` style references from a name -> color mapping."""

    def __init__(self, palette=None):
        self._palette = {}
        for name, value in (palette or {}).items():
            self._palette[_normalize_ref(name)] = value

    def resolve(self, ref: str) -> int:
        key = _normalize_ref(ref)
        if not key:
            raise InvalidResourceError("Empty color resource reference.")
        if key not in self._palette:
            raise InvalidResourceError(f"Unknown color resource: {ref}")
        return parse_color(self._palette[key])


def _normalize_ref(ref) -> str:
    normalized = str(ref or "").strip()
    if normalized.startswith(RESOURCE_PREFIX):
        normalized = normalized[len(RESOURCE_PREFIX):]
    return normalized


__all__ = ["PaletteResourceResolver", "format_color", "parse_color"]

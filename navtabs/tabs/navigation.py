from dataclasses import dataclass
from typing import Union
from urllib.parse import ParseResult, SplitResult, urlsplit

from navtabs.tabs.errors import InvalidAddressError
from navtabs.tabs.options import TabOptions


BLOCKED_SCHEMES = {"javascript"}
NETWORK_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def parse_address(target) -> str:
    """Validate a navigation target and return it as normalized text."""
    if isinstance(target, (SplitResult, ParseResult)):
        target = target.geturl()
    if not isinstance(target, str):
        raise InvalidAddressError(f"Unsupported address type: {type(target).__name__}")

    normalized = target.strip()
    if not normalized:
        raise InvalidAddressError("Empty URL cannot be opened.")
    if any(ch.isspace() for ch in normalized):
        raise InvalidAddressError(f"URL contains whitespace: {normalized!r}")

    try:
        parsed = urlsplit(normalized)
    except ValueError as exc:
        raise InvalidAddressError(f"Unparseable URL: {exc}") from exc

    scheme = (parsed.scheme or "").lower()
    if not scheme:
        raise InvalidAddressError(f"URL has no scheme: {normalized}")
    if scheme in BLOCKED_SCHEMES:
        raise InvalidAddressError(f"Blocked URL scheme: {scheme}")
    if scheme in NETWORK_SCHEMES and not parsed.netloc:
        raise InvalidAddressError(f"URL has no host: {normalized}")
    if not parsed.netloc and parsed.path.isdigit() and (scheme == "localhost" or "." in scheme):
        # "localhost:8080" splits into scheme "localhost" and path "8080".
        raise InvalidAddressError(f"URL has no scheme: {normalized}")
    return normalized


@dataclass(frozen=True)
class DedicatedEngine:
    options: TabOptions


@dataclass(frozen=True)
class GenericFallback:
    pass


Engine = Union[DedicatedEngine, GenericFallback]


@dataclass(frozen=True)
class NavigationRequest:
    target_address: str
    engine: Engine

    @property
    def uses_dedicated_engine(self) -> bool:
        return isinstance(self.engine, DedicatedEngine)


__all__ = [
    "DedicatedEngine",
    "Engine",
    "GenericFallback",
    "NavigationRequest",
    "parse_address",
]

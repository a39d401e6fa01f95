"""Framework-free request context consumed by the mapper and finalizer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

from starlette.requests import Request


def parse_accept(value: str | None) -> tuple[str, ...]:
    """Split an Accept header into bare, lower-cased media types in header order."""
    if not value:
        return ()

    media_types: list[str] = []
    for entry in value.split(","):
        media_type = entry.split(";", 1)[0].strip().lower()
        if media_type:
            media_types.append(media_type)
    return tuple(media_types)


@dataclass(frozen=True)
class RequestContext:
    """The request attributes the error translation layer reads."""

    url: str
    header_keys: frozenset[str] = field(default_factory=frozenset)
    accept: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        url: str,
        *,
        header_keys: Iterable[str] = (),
        accept: str | None = None,
    ) -> RequestContext:
        """Normalize raw header data into a context."""
        return cls(
            url=url,
            header_keys=frozenset(key.lower() for key in header_keys),
            accept=parse_accept(accept),
        )

    @classmethod
    def from_request(cls, request: Request) -> RequestContext:
        """Capture the context of an incoming Starlette request."""
        return cls.build(
            str(request.url),
            header_keys=request.headers.keys(),
            accept=request.headers.get("accept"),
        )

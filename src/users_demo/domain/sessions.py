"""Session header state shared across requests."""

from collections.abc import Iterable
from dataclasses import dataclass

COOKIE_HEADER = "Cookie"


@dataclass(frozen=True)
class SessionHeader:
    """Cookie header value captured once from the bootstrap response."""

    cookie: str

    @classmethod
    def from_fragments(cls, fragments: Iterable[str]) -> "SessionHeader":
        """Join Set-Cookie fragments with ';' in response order."""
        return cls(cookie=";".join(fragments))

    def as_headers(self) -> dict[str, str]:
        return {COOKIE_HEADER: self.cookie}

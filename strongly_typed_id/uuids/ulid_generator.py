# (c) Nelen & Schuurmans
from ulid import ULID

from ..base.domain import IdGenerator

__all__ = ["UlidGenerator"]


class UlidGenerator(IdGenerator):
    """Lexicographically sortable ids (Crockford base32), lowercased."""

    def generate(self) -> str:
        return str(ULID()).lower()

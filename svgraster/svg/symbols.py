"""Symbol table for ``id`` / ``use`` reference resolution.

Entries are stored as private copies and every lookup hands out fresh copies,
so transforming a ``use`` instance can never reach back into the definition
(or into any other instance of it).
"""

from __future__ import annotations

import logging

from svgraster.models.shapes import Shape, copy_shapes

logger = logging.getLogger(__name__)


class SymbolTable:
    def __init__(self) -> None:
        self._entries: dict[str, list[Shape]] = {}

    def register(self, ident: str, shapes: list[Shape]) -> None:
        if ident in self._entries:
            logger.debug("Redefining id %r", ident)
        self._entries[ident] = copy_shapes(shapes)

    def resolve(self, ident: str) -> list[Shape]:
        """Fresh copies of the entry, or [] if ``ident`` is unknown."""
        entry = self._entries.get(ident)
        if entry is None:
            return []
        return copy_shapes(entry)

    def ids(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, ident: object) -> bool:
        return ident in self._entries

    def __len__(self) -> int:
        return len(self._entries)

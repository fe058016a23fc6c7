"""
In-memory POS storage

Reference implementation of the PosDataService port. Used by the CLI and
the test suite; a real deployment plugs in its own persistence.
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List

from loguru import logger

from .exceptions import DuplicatePosNameError, PosNotFoundError
from .models import Pos


class InMemoryPosDataService:
    """Keeps POS entries in a dict keyed by ID; satisfies PosDataService"""

    def __init__(self):
        self._items: Dict[int, Pos] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get_by_id(self, pos_id: int) -> Pos:
        with self._lock:
            pos = self._items.get(pos_id)
        if pos is None:
            raise PosNotFoundError(pos_id)
        return pos

    def get_all(self) -> List[Pos]:
        with self._lock:
            return [self._items[pos_id] for pos_id in sorted(self._items)]

    def upsert(self, pos: Pos) -> Pos:
        now = datetime.now(timezone.utc)
        with self._lock:
            # Name uniqueness, as a unique constraint would enforce it
            for existing in self._items.values():
                if existing.name == pos.name and existing.id != pos.id:
                    raise DuplicatePosNameError(pos.name)

            if pos.id is None:
                stored = pos.model_copy(update={"id": self._next_id, "created_at": now, "updated_at": now})
                self._next_id += 1
            else:
                current = self._items.get(pos.id)
                if current is None:
                    raise PosNotFoundError(pos.id)
                stored = pos.model_copy(update={"created_at": current.created_at, "updated_at": now})

            self._items[stored.id] = stored

        logger.debug(f"Stored POS {stored.id} ('{stored.name}')")
        return stored

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

"""Save/load use cases for grid selection state."""

from __future__ import annotations

import logging
from enum import StrEnum

from datagrid.core.errors import GridError
from datagrid.core.selection import SelectionStore
from datagrid.infra.config import DEFAULT_STORAGE_KEY
from datagrid.persistence.repository import StateRepository

logger = logging.getLogger(__name__)


class LoadStatus(StrEnum):
    """Outcome of a load request."""

    LOADED = "LOADED"
    MISSING = "MISSING"
    CORRUPT = "CORRUPT"


class GridStateService:
    """Persist a selection store under a single storage key."""

    def __init__(self, repository: StateRepository, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._repository = repository
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, store: SelectionStore) -> None:
        """Write the serialized selection."""
        self._repository.set(self._key, store.serialize())
        logger.info("grid_state_saved key=%s count=%d", self._key, store.size)

    def load(self, store: SelectionStore) -> LoadStatus:
        """Restore saved selection into ``store``.

        Missing state is reported as ``MISSING``. Unreadable state is logged
        and reported as ``CORRUPT``; the store keeps its current selection.
        """
        try:
            serialized = self._repository.get(self._key)
            if serialized is None:
                logger.info("grid_state_missing key=%s", self._key)
                return LoadStatus.MISSING
            store.restore(serialized)
        except GridError:
            logger.warning("grid_state_corrupt key=%s", self._key, exc_info=True)
            return LoadStatus.CORRUPT
        logger.info("grid_state_loaded key=%s count=%d", self._key, store.size)
        return LoadStatus.LOADED

    def forget(self) -> None:
        """Delete saved state."""
        self._repository.remove(self._key)

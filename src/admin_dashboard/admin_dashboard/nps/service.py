from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import validate
from ..core.constants import DEFAULT_NPS_HISTORY
from ..core.exceptions import ValidationError
from .model import NpsTrimestralEntry
from .repository import NpsTrimestralRepository
from .schemas import NpsEntry

logger = logging.getLogger(__name__)


class NpsTrimestralService:
    def __init__(self, entries: NpsTrimestralRepository, *, history: int = DEFAULT_NPS_HISTORY):
        self._entries = entries
        self._history = history

    @staticmethod
    def _check_user(user_id: int) -> int:
        if int(user_id) <= 0:
            raise ValidationError("userId must be positive")
        return int(user_id)

    def history(self, user_id: int) -> Sequence[NpsTrimestralEntry]:
        return self._entries.latest_for_user(self._check_user(user_id), limit=self._history)

    def record(self, user_id: int, payload: Mapping[str, Any]) -> NpsEntry:
        """Store the NPS of a month, replacing a previous value for that month."""

        user_id = self._check_user(user_id)
        entry = validate(NpsEntry, payload)
        self._entries.upsert(user_id=user_id, month=entry.month, nps=entry.nps)
        logger.info("Quarterly NPS stored for user %s month %s", user_id, entry.month)
        return entry

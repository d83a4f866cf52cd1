import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from .models import WorkoutPlan

logger = logging.getLogger(__name__)


class PlanStore:
    """In-memory plan list, newest first. Stored plans are never edited."""

    def __init__(self) -> None:
        self._plans: List[WorkoutPlan] = []
        self._lock = threading.Lock()

    def add(self, plan: WorkoutPlan) -> WorkoutPlan:
        # every stored copy gets its own id and shares nothing with the caller's plan
        stored = plan.model_copy(
            update={"id": uuid.uuid4().hex, "created_at": datetime.now(timezone.utc)},
            deep=True,
        )
        with self._lock:
            self._plans.insert(0, stored)
        logger.info("Stored workout plan %s", stored.id)
        return stored

    def get(self, plan_id: str) -> Optional[WorkoutPlan]:
        with self._lock:
            return next((p for p in self._plans if p.id == plan_id), None)

    def list(self) -> List[WorkoutPlan]:
        with self._lock:
            return list(self._plans)

    def remove(self, plan_id: str) -> bool:
        with self._lock:
            before = len(self._plans)
            self._plans = [p for p in self._plans if p.id != plan_id]
            return len(self._plans) < before

    def clear(self) -> None:
        with self._lock:
            self._plans = []

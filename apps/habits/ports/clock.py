# apps/habits/ports/clock.py
from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Bieżąca chwila (świadoma strefy albo lokalna)."""
        pass

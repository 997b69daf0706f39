# apps/habits/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Mapping, Optional
from apps.habits.domain.entities import HabitEntity


class ICompletionLogStore(ABC):
    @abstractmethod
    def append(self, habit_id: int, period_key: str) -> None:
        """
        Dopisuje log wykonania.
        DuplicateKeyError dla istniejącej pary (habit_id, period_key),
        StoreError dla każdego innego błędu.
        """
        pass

    @abstractmethod
    def count_by_habit(self, habit_ids: Iterable[int]) -> Dict[int, int]:
        """Liczba logów per nawyk; 0 dla każdego id bez wpisów."""
        pass


class IHabitRepository(ABC):
    @abstractmethod
    def get_by_id(self, habit_id: int) -> Optional[HabitEntity]:
        pass

    @abstractmethod
    def save(self, habit: HabitEntity) -> HabitEntity:
        """Tworzy lub aktualizuje nawyk i zwraca encję (z ID)."""
        pass

    @abstractmethod
    def get_public_habits(self, filters: Optional[Mapping[str, str]] = None) -> List[HabitEntity]:
        """Publiczne nawyki w kolejności utworzenia."""
        pass

    @abstractmethod
    def get_for_user(self, user_id: int) -> List[HabitEntity]:
        pass

    @abstractmethod
    def user_has_habits(self, user_id: int) -> bool:
        pass


class IProfileRepository(ABC):
    @abstractmethod
    def get_display_names(self, user_ids: Iterable[int]) -> Dict[int, str]:
        pass

    @abstractmethod
    def get_display_name(self, user_id: int) -> str:
        pass

    @abstractmethod
    def set_display_name(self, user_id: int, display_name: str) -> None:
        pass

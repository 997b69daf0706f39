# apps/habits/domain/exceptions.py


class HabitError(Exception):
    """Bazowy wyjątek domeny nawyków."""


class StoreError(HabitError):
    """Błąd magazynu (sieć, walidacja, uprawnienia). Komunikat pokazujemy 1:1."""


class DuplicateKeyError(StoreError):
    """Drugi wpis dla tej samej pary (habit, period_key)."""

    def __init__(self, habit_id, period_key):
        self.habit_id = habit_id
        self.period_key = period_key
        super().__init__(f"Habit {habit_id} already logged for period {period_key}")


class EmptyInputError(HabitError, ValueError):
    def __init__(self, field_name, message):
        self.field_name = field_name
        super().__init__(message)


class HabitNotFoundError(HabitError):
    pass


class PermissionDeniedError(HabitError):
    pass

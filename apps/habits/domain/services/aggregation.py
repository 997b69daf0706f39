# apps/habits/domain/services/aggregation.py
from typing import Dict, Iterable

from apps.habits.ports.repositories import ICompletionLogStore


class ProgressAggregator:
    """
    Liczy sumy wykonań per nawyk.

    Bez cache'u - każde wywołanie pyta magazyn, żeby grupa zawsze widziała
    aktualny stan.
    """

    def __init__(self, store: ICompletionLogStore):
        self.store = store

    def totals(self, habit_ids: Iterable[int]) -> Dict[int, int]:
        ids = list(dict.fromkeys(habit_ids))  # bez duplikatów, kolejność zachowana
        if not ids:
            return {}

        counts = self.store.count_by_habit(ids)
        # Brak wpisu w wyniku = 0
        return {habit_id: int(counts.get(habit_id, 0)) for habit_id in ids}

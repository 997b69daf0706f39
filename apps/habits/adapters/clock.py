# apps/habits/adapters/clock.py
from datetime import date, datetime, time
from typing import Union

from django.utils import timezone

from apps.habits.ports.clock import IClock


class SystemClock(IClock):
    def now(self) -> datetime:
        # Czas lokalny wg settings.TIME_ZONE
        return timezone.localtime()


class FixedClock(IClock):
    """Zegar zatrzymany w jednej chwili (testy, `show_grid --at`)."""

    def __init__(self, instant: Union[date, datetime]):
        if not isinstance(instant, datetime):
            # Sama data -> południe, z dala od granic dnia
            instant = datetime.combine(instant, time(12, 0))
        if timezone.is_naive(instant):
            instant = timezone.make_aware(instant)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

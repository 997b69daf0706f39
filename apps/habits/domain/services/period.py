# apps/habits/domain/services/period.py
from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta, MO
from django.utils import timezone

from apps.habits.domain.entities import Cadence

Instant = Union[date, datetime]


def local_date(now: Instant) -> date:
    """Sprowadza chwilę do daty w lokalnym kalendarzu (settings.TIME_ZONE)."""
    if isinstance(now, datetime):
        if timezone.is_aware(now):
            now = timezone.localtime(now)
        return now.date()
    return now


def period_start(cadence, now: Instant) -> date:
    """Pierwszy dzień okresu, do którego należy `now`."""
    day = local_date(now)
    cadence = Cadence(cadence)

    if cadence == Cadence.DAILY:
        return day

    if cadence == Cadence.WEEKLY:
        # Tydzień od poniedziałku; MO(-1) nie przesuwa, jeśli to już poniedziałek
        return day + relativedelta(weekday=MO(-1))

    return day.replace(day=1)


def period_key(cadence, now: Instant) -> str:
    """
    Kanoniczny klucz okresu w formacie YYYY-MM-DD.

    To jest dyskryminator unikalności logów - zmiana formatu łamie
    ograniczenie (habit, period_key) w bazie.
    """
    return period_start(cadence, now).isoformat()

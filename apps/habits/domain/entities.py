# apps/habits/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from enum import Enum


class Cadence(str, Enum):
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'


class LayoutPolicy(str, Enum):
    SQUARE = 'square'  # kwadratowa siatka + puste kafelki
    FLUID = 'fluid'    # auto-fill, bez dopełniania


# Etykiety zależne od kadencji
PERIOD_LABELS = {
    Cadence.DAILY: 'today',
    Cadence.WEEKLY: 'this week',
    Cadence.MONTHLY: 'this month',
}

UNIT_LABELS = {
    Cadence.DAILY: 'days',
    Cadence.WEEKLY: 'weeks',
    Cadence.MONTHLY: 'months',
}


def period_label(cadence) -> str:
    """'today' / 'this week' / 'this month'."""
    return PERIOD_LABELS[Cadence(cadence)]


def unit_label(cadence) -> str:
    """'days' / 'weeks' / 'months'."""
    return UNIT_LABELS[Cadence(cadence)]


@dataclass
class HabitEntity:
    id: Optional[int]  # None przed zapisem
    user_id: int
    title: str
    cadence: Cadence = Cadence.DAILY
    progress_marker: str = '⭐'
    is_public: bool = True
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Tile:
    habit_id: int
    owner_id: int
    display_name: str
    title: str
    cadence: Cadence
    marker: str
    total: int
    can_log: bool

    @property
    def unit_label(self) -> str:
        return unit_label(self.cadence)

    @property
    def period_label(self) -> str:
        return period_label(self.cadence)

    @property
    def stamps(self) -> str:
        return self.marker * self.total


@dataclass(frozen=True)
class GridLayout:
    columns: Optional[int]  # None = auto-fill
    empty_slots: int = 0
    policy: LayoutPolicy = LayoutPolicy.SQUARE

    @property
    def empty_range(self) -> range:
        # Dla szablonu: {% for _ in grid.layout.empty_range %}
        return range(self.empty_slots)


@dataclass
class Grid:
    tiles: List[Tile] = field(default_factory=list)
    layout: GridLayout = field(default_factory=lambda: GridLayout(columns=0))

    @classmethod
    def empty(cls, policy: LayoutPolicy = LayoutPolicy.SQUARE) -> 'Grid':
        columns = None if policy == LayoutPolicy.FLUID else 0
        return cls(tiles=[], layout=GridLayout(columns=columns, empty_slots=0, policy=policy))

# apps/habits/domain/services/grid.py
import math
import unicodedata
from typing import Iterable, Mapping, Optional

from apps.habits.domain.entities import Grid, GridLayout, HabitEntity, LayoutPolicy, Tile, Cadence

DEFAULT_NAME_PLACEHOLDER = 'Someone'


def collation_key(value: Optional[str]) -> str:
    """
    Klucz porównania na poziomie "base": bez wielkości liter i bez diakrytyków.
    'Émile' i 'emile' dają ten sam klucz.
    """
    decomposed = unicodedata.normalize('NFKD', (value or '').strip())
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def grid_layout(count: int, policy: LayoutPolicy = LayoutPolicy.SQUARE) -> GridLayout:
    policy = LayoutPolicy(policy)

    if policy == LayoutPolicy.FLUID:
        return GridLayout(columns=None, empty_slots=0, policy=policy)

    if count <= 0:
        return GridLayout(columns=0, empty_slots=0, policy=policy)

    if count <= 2:
        # jeden rząd, bez pustych pól
        return GridLayout(columns=count, empty_slots=0, policy=policy)

    # ceil(sqrt(n)) na liczbach całkowitych
    columns = math.isqrt(count - 1) + 1
    empty_slots = max(0, columns * columns - count)
    return GridLayout(columns=columns, empty_slots=empty_slots, policy=policy)


class GridComposer:
    def __init__(self, policy: LayoutPolicy = LayoutPolicy.SQUARE, placeholder: str = DEFAULT_NAME_PLACEHOLDER):
        self.policy = LayoutPolicy(policy)
        self.placeholder = placeholder

    def compose(
            self,
            habits: Iterable[HabitEntity],
            names_by_user: Mapping[int, str],
            totals: Mapping[int, int],
            viewer_id: Optional[int]
    ) -> Grid:
        names_by_user = names_by_user or {}
        totals = totals or {}

        def name_of(habit: HabitEntity) -> str:
            return (names_by_user.get(habit.user_id) or '').strip()

        def sort_key(habit: HabitEntity):
            return (
                habit.user_id != viewer_id,          # 1. moje kafelki najpierw
                collation_key(name_of(habit)),       # 2. imię
                collation_key(habit.title),          # 3. tytuł celu
                habit.id,                            # 4. id - pełny porządek
            )

        ordered = sorted(habits, key=sort_key)

        tiles = [
            Tile(
                habit_id=h.id,
                owner_id=h.user_id,
                display_name=name_of(h) or self.placeholder,
                title=h.title,
                cadence=Cadence(h.cadence),
                marker=h.progress_marker,
                total=int(totals.get(h.id, 0)),
                can_log=viewer_id is not None and h.user_id == viewer_id,
            )
            for h in ordered
        ]

        return Grid(tiles=tiles, layout=grid_layout(len(tiles), self.policy))


# apps/habits/adapters/orm_repositories.py
import functools
import logging
from typing import Dict, Iterable, List, Mapping, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count

from apps.core.models import UserProfile
from apps.habits.domain.entities import Cadence, HabitEntity
from apps.habits.domain.exceptions import DuplicateKeyError, StoreError
from apps.habits.filters import HabitFilter
from apps.habits.models import Habit as HabitModel, HabitLog as HabitLogModel
from apps.habits.ports.repositories import ICompletionLogStore, IHabitRepository, IProfileRepository

logger = logging.getLogger(__name__)


def store_errors(func):
    """Zamienia błędy bazy na StoreError, żeby domena nie znała Django."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as exc:
            logger.warning("Store call %s failed: %s", func.__name__, exc)
            raise StoreError(str(exc)) from exc
    return wrapper


class DjangoCompletionLogStore(ICompletionLogStore):
    def append(self, habit_id: int, period_key: str) -> None:
        try:
            if not HabitModel.objects.filter(id=habit_id).exists():
                raise StoreError(f"Habit {habit_id} does not exist")

            # atomic(): po IntegrityError połączenie zostaje używalne
            with transaction.atomic():
                HabitLogModel.objects.create(habit_id=habit_id, period_key=period_key)

        except IntegrityError as exc:
            if HabitLogModel.objects.filter(habit_id=habit_id, period_key=period_key).exists():
                raise DuplicateKeyError(habit_id, period_key) from exc
            raise StoreError(str(exc)) from exc
        except DatabaseError as exc:
            raise StoreError(str(exc)) from exc

    @store_errors
    def count_by_habit(self, habit_ids: Iterable[int]) -> Dict[int, int]:
        ids = set(habit_ids)
        counts = dict.fromkeys(ids, 0)
        if not ids:
            return counts

        rows = (
            HabitLogModel.objects
            .filter(habit_id__in=ids)
            .values('habit_id')
            .annotate(total=Count('id'))
        )
        for row in rows:
            counts[row['habit_id']] = row['total']

        return counts


class DjangoHabitRepository(IHabitRepository):
    def to_entity(self, model: HabitModel) -> HabitEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return HabitEntity(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            cadence=Cadence(model.cadence),
            progress_marker=model.progress_marker,
            is_public=model.is_public,
            created_at=model.created_at,
        )

    @store_errors
    def get_by_id(self, habit_id: int) -> Optional[HabitEntity]:
        try:
            habit = HabitModel.objects.get(id=habit_id)
            return self.to_entity(habit)
        except HabitModel.DoesNotExist:
            return None

    @store_errors
    def save(self, habit: HabitEntity) -> HabitEntity:
        data = {
            'title': habit.title,
            'cadence': Cadence(habit.cadence).value,
            'progress_marker': habit.progress_marker,
            'is_public': habit.is_public,
        }

        if habit.id:
            # Kadencja się nie zmienia po utworzeniu (klucze okresów!)
            data.pop('cadence')
            HabitModel.objects.filter(id=habit.id).update(**data)
            obj = HabitModel.objects.get(id=habit.id)
        else:
            obj = HabitModel.objects.create(user_id=habit.user_id, **data)

        return self.to_entity(obj)

    @store_errors
    def get_public_habits(self, filters: Optional[Mapping[str, str]] = None) -> List[HabitEntity]:
        qs = HabitModel.objects.filter(is_public=True).order_by('created_at', 'id')
        if filters:
            qs = HabitFilter(filters, queryset=qs).qs
        return [self.to_entity(h) for h in qs]

    @store_errors
    def get_for_user(self, user_id: int) -> List[HabitEntity]:
        qs = HabitModel.objects.filter(user_id=user_id).order_by('created_at', 'id')
        return [self.to_entity(h) for h in qs]

    @store_errors
    def user_has_habits(self, user_id: int) -> bool:
        return HabitModel.objects.filter(user_id=user_id).exists()


class DjangoProfileRepository(IProfileRepository):
    @store_errors
    def get_display_names(self, user_ids: Iterable[int]) -> Dict[int, str]:
        ids = set(user_ids)
        if not ids:
            return {}
        rows = UserProfile.objects.filter(user_id__in=ids).values_list('user_id', 'display_name')
        return {user_id: name or '' for user_id, name in rows}

    @store_errors
    def get_display_name(self, user_id: int) -> str:
        name = UserProfile.objects.filter(user_id=user_id).values_list('display_name', flat=True).first()
        return name or ''

    @store_errors
    def set_display_name(self, user_id: int, display_name: str) -> None:
        UserProfile.objects.update_or_create(user_id=user_id, defaults={'display_name': display_name})

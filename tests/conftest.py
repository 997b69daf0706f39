import pytest

from apps.habits.domain.entities import Cadence, HabitEntity
from apps.habits.models import Habit


@pytest.fixture
def make_user(django_user_model):
    def _make_user(username, display_name=None):
        user = django_user_model.objects.create_user(username=username, password='secret-pass-123')
        if display_name is not None:
            user.profile.display_name = display_name
            user.profile.save()
        return user
    return _make_user


@pytest.fixture
def make_habit():
    def _make_habit(user, title='Yoga', cadence=Cadence.DAILY, marker='🧘', is_public=True):
        return Habit.objects.create(
            user=user,
            title=title,
            cadence=Cadence(cadence).value,
            progress_marker=marker,
            is_public=is_public,
        )
    return _make_habit


@pytest.fixture
def habit_entity():
    def _habit_entity(habit_id, user_id, title='Yoga', cadence=Cadence.DAILY, marker='⭐', is_public=True):
        return HabitEntity(
            id=habit_id,
            user_id=user_id,
            title=title,
            cadence=Cadence(cadence),
            progress_marker=marker,
            is_public=is_public,
        )
    return _habit_entity

import pytest

from apps.core.models import UserProfile
from apps.habits.adapters.orm_repositories import (
    DjangoCompletionLogStore,
    DjangoHabitRepository,
    DjangoProfileRepository,
)
from apps.habits.domain.entities import Cadence, HabitEntity
from apps.habits.domain.exceptions import DuplicateKeyError, StoreError
from apps.habits.models import Habit, HabitLog

pytestmark = pytest.mark.django_db


class TestCompletionLogStore:
    def test_second_append_in_same_period_is_duplicate(self, make_user, make_habit):
        habit = make_habit(make_user('alice'))
        store = DjangoCompletionLogStore()

        store.append(habit.id, '2024-06-03')
        with pytest.raises(DuplicateKeyError) as exc_info:
            store.append(habit.id, '2024-06-03')

        assert exc_info.value.period_key == '2024-06-03'
        assert store.count_by_habit([habit.id]) == {habit.id: 1}

    def test_duplicate_is_a_store_error(self):
        assert issubclass(DuplicateKeyError, StoreError)

    def test_store_stays_usable_after_duplicate(self, make_user, make_habit):
        habit = make_habit(make_user('alice'))
        store = DjangoCompletionLogStore()

        store.append(habit.id, '2024-06-03')
        with pytest.raises(DuplicateKeyError):
            store.append(habit.id, '2024-06-03')
        store.append(habit.id, '2024-06-10')

        assert store.count_by_habit([habit.id]) == {habit.id: 2}

    def test_same_period_for_different_habits_is_fine(self, make_user, make_habit):
        user = make_user('alice')
        first, second = make_habit(user, title='Yoga'), make_habit(user, title='Run')
        store = DjangoCompletionLogStore()

        store.append(first.id, '2024-06-03')
        store.append(second.id, '2024-06-03')

        assert store.count_by_habit([first.id, second.id]) == {first.id: 1, second.id: 1}

    def test_habit_without_entries_counts_zero(self, make_user, make_habit):
        habit = make_habit(make_user('alice'))
        assert DjangoCompletionLogStore().count_by_habit([habit.id]) == {habit.id: 0}

    def test_unknown_ids_are_zero_filled(self):
        assert DjangoCompletionLogStore().count_by_habit([999, 1000]) == {999: 0, 1000: 0}

    def test_empty_count_does_not_query(self, django_assert_num_queries):
        with django_assert_num_queries(0):
            assert DjangoCompletionLogStore().count_by_habit([]) == {}

    def test_count_is_a_single_query(self, make_user, make_habit, django_assert_num_queries):
        user = make_user('alice')
        habits = [make_habit(user, title=f'Goal {i}') for i in range(3)]
        store = DjangoCompletionLogStore()
        for habit in habits:
            store.append(habit.id, '2024-06-01')

        with django_assert_num_queries(1):
            store.count_by_habit([h.id for h in habits])

    def test_append_for_missing_habit_is_store_error_not_duplicate(self):
        with pytest.raises(StoreError) as exc_info:
            DjangoCompletionLogStore().append(12345, '2024-06-03')
        assert not isinstance(exc_info.value, DuplicateKeyError)
        assert HabitLog.objects.count() == 0


class TestHabitRepository:
    def test_save_creates_and_maps_entity(self, make_user):
        user = make_user('alice')
        repo = DjangoHabitRepository()

        saved = repo.save(HabitEntity(id=None, user_id=user.id, title='Yoga', cadence=Cadence.WEEKLY,
                                      progress_marker='🧘'))

        assert saved.id is not None
        assert saved.cadence == Cadence.WEEKLY
        assert saved.created_at is not None
        assert Habit.objects.get(id=saved.id).user_id == user.id

    def test_update_keeps_cadence(self, make_user, make_habit):
        habit = make_habit(make_user('alice'), cadence=Cadence.MONTHLY)
        repo = DjangoHabitRepository()
        entity = repo.get_by_id(habit.id)

        entity.title = 'Pilates'
        entity.progress_marker = '🤸'
        entity.cadence = Cadence.DAILY
        updated = repo.save(entity)

        assert updated.title == 'Pilates'
        assert updated.progress_marker == '🤸'
        assert updated.cadence == Cadence.MONTHLY

    def test_get_by_id_missing(self):
        assert DjangoHabitRepository().get_by_id(424242) is None

    def test_public_habits_in_creation_order(self, make_user, make_habit):
        alice, bob = make_user('alice'), make_user('bob')
        first = make_habit(alice, title='Yoga')
        make_habit(bob, title='Secret', is_public=False)
        third = make_habit(bob, title='Run')

        habits = DjangoHabitRepository().get_public_habits()

        assert [h.id for h in habits] == [first.id, third.id]

    def test_public_habits_filtered_by_cadence(self, make_user, make_habit):
        user = make_user('alice')
        make_habit(user, title='Yoga', cadence=Cadence.DAILY)
        weekly = make_habit(user, title='Long run', cadence=Cadence.WEEKLY)

        habits = DjangoHabitRepository().get_public_habits({'cadence': 'weekly'})

        assert [h.id for h in habits] == [weekly.id]

    def test_invalid_filter_is_ignored(self, make_user, make_habit):
        make_habit(make_user('alice'))
        assert len(DjangoHabitRepository().get_public_habits({'cadence': 'yearly'})) == 1

    def test_get_for_user_and_has_habits(self, make_user, make_habit):
        alice, bob = make_user('alice'), make_user('bob')
        make_habit(alice, is_public=False)
        repo = DjangoHabitRepository()

        assert len(repo.get_for_user(alice.id)) == 1
        assert repo.user_has_habits(alice.id) is True
        assert repo.user_has_habits(bob.id) is False


class TestProfileRepository:
    def test_profile_created_with_user(self, make_user):
        user = make_user('alice')
        assert UserProfile.objects.filter(user=user, display_name='').exists()

    def test_display_names(self, make_user):
        alice = make_user('alice', display_name='Alice')
        bob = make_user('bob')
        repo = DjangoProfileRepository()

        assert repo.get_display_names([alice.id, bob.id, 999]) == {alice.id: 'Alice', bob.id: ''}
        assert repo.get_display_names([]) == {}

    def test_set_display_name(self, make_user):
        user = make_user('alice')
        repo = DjangoProfileRepository()

        repo.set_display_name(user.id, 'Ali')

        assert repo.get_display_name(user.id) == 'Ali'

    def test_deleting_user_cascades_to_habits_and_logs(self, make_user, make_habit):
        user = make_user('alice')
        habit = make_habit(user)
        DjangoCompletionLogStore().append(habit.id, '2024-06-03')

        user.delete()

        assert not Habit.objects.exists()
        assert not HabitLog.objects.exists()
        assert not UserProfile.objects.exists()

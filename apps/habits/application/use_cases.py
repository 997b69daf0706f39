# apps/habits/application/use_cases.py
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional

from apps.habits.domain.entities import Cadence, Grid, HabitEntity, period_label
from apps.habits.domain.exceptions import (
    DuplicateKeyError,
    EmptyInputError,
    HabitError,
    HabitNotFoundError,
    PermissionDeniedError,
    StoreError,
)
from apps.habits.domain.services import GridComposer, ProgressAggregator, period_key
from apps.habits.ports.clock import IClock
from apps.habits.ports.repositories import ICompletionLogStore, IHabitRepository, IProfileRepository

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong."


def _required(value: Optional[str], field_name: str, message: str) -> str:
    cleaned = (value or '').strip()
    if not cleaned:
        raise EmptyInputError(field_name, message)
    return cleaned


def _load_own_habit(repository: IHabitRepository, habit_id: int, user_id: int) -> HabitEntity:
    habit = repository.get_by_id(habit_id)
    if habit is None:
        raise HabitNotFoundError("Goal not found.")
    if habit.user_id != user_id:
        raise PermissionDeniedError("You can only update your own goals.")
    return habit


# --- Log completion ---

class LogStatus(str, Enum):
    OK = 'ok'
    DUPLICATE = 'duplicate'
    ERROR = 'error'


@dataclass
class LogCompletionInput:
    habit_id: int
    user_id: int


@dataclass
class LogCompletionResult:
    status: LogStatus
    message: str = ""
    period_key: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == LogStatus.OK


class LogCompletionUseCase:
    """
    Zapisuje wykonanie nawyku w bieżącym okresie.

    Wszystkie porażki wracają jako LogCompletionResult - widok nigdy nie
    dostaje wyjątku. Duplikat jest informacją dla użytkownika, nie błędem
    systemu, i nie jest ponawiany. Sumy przelicza siatka po przekierowaniu.
    """

    def __init__(self, habit_repository: IHabitRepository, store: ICompletionLogStore, clock: IClock):
        self.habit_repository = habit_repository
        self.store = store
        self.clock = clock

    def execute(self, input_dto: LogCompletionInput) -> LogCompletionResult:
        try:
            habit = _load_own_habit(self.habit_repository, input_dto.habit_id, input_dto.user_id)
        except HabitError as e:
            return LogCompletionResult(status=LogStatus.ERROR, message=str(e) or GENERIC_ERROR_MESSAGE)

        key = period_key(habit.cadence, self.clock.now())

        try:
            self.store.append(habit.id, key)
        except DuplicateKeyError:
            logger.info("Habit %s already logged for %s", habit.id, key)
            return LogCompletionResult(
                status=LogStatus.DUPLICATE,
                message=f"You already logged it {period_label(habit.cadence)}!",
                period_key=key,
            )
        except StoreError as e:
            logger.warning("Logging habit %s for %s failed: %s", habit.id, key, e)
            return LogCompletionResult(
                status=LogStatus.ERROR,
                message=str(e) or GENERIC_ERROR_MESSAGE,
                period_key=key,
            )

        logger.info("Habit %s logged for period %s", habit.id, key)
        return LogCompletionResult(
            status=LogStatus.OK,
            message=f"Logged {period_label(habit.cadence)}!",
            period_key=key,
        )


# --- Totals / grid ---

class GetTotalsUseCase:
    def __init__(self, store: ICompletionLogStore):
        self.aggregator = ProgressAggregator(store)

    def execute(self, habit_ids: Iterable[int]) -> Dict[int, int]:
        return self.aggregator.totals(habit_ids)


class ComposeGridUseCase:
    def __init__(
            self,
            habit_repository: IHabitRepository,
            profile_repository: IProfileRepository,
            store: ICompletionLogStore,
            composer: Optional[GridComposer] = None
    ):
        self.habit_repository = habit_repository
        self.profile_repository = profile_repository
        self.aggregator = ProgressAggregator(store)
        self.composer = composer or GridComposer()

    def execute(self, viewer_id: Optional[int], filters: Optional[Mapping[str, str]] = None) -> Grid:
        habits = self.habit_repository.get_public_habits(filters)

        # 1. Imiona właścicieli, 2. Sumy - oba tylko dla tego, co na siatce
        user_ids = {h.user_id for h in habits}
        names = self.profile_repository.get_display_names(user_ids) if user_ids else {}
        totals = self.aggregator.totals(h.id for h in habits)

        return self.composer.compose(habits, names, totals, viewer_id)


# --- Onboarding ---

@dataclass
class CreateHabitInput:
    user_id: int
    display_name: str
    title: str
    cadence: str = Cadence.DAILY.value
    progress_marker: str = ''
    is_public: bool = True


class CreateHabitUseCase:
    def __init__(self, habit_repository: IHabitRepository, profile_repository: IProfileRepository):
        self.habit_repository = habit_repository
        self.profile_repository = profile_repository

    def execute(self, input_dto: CreateHabitInput) -> HabitEntity:
        # Walidacja przed jakimkolwiek zapisem
        display_name = _required(input_dto.display_name, 'display_name', "Please enter your name 🙂")
        title = _required(input_dto.title, 'title', "Please give your goal a name (e.g., Yoga).")
        marker = _required(input_dto.progress_marker, 'progress_marker', "Please choose an emoji.")

        try:
            cadence = Cadence(input_dto.cadence)
        except ValueError:
            raise EmptyInputError("cadence", "Please choose how often: daily, weekly or monthly.") from None

        self.profile_repository.set_display_name(input_dto.user_id, display_name)

        habit = self.habit_repository.save(HabitEntity(
            id=None,
            user_id=input_dto.user_id,
            title=title,
            cadence=cadence,
            progress_marker=marker,
            is_public=input_dto.is_public,
        ))
        logger.info("User %s created habit %s (%s)", input_dto.user_id, habit.id, cadence.value)
        return habit


# --- Profile edit ---

@dataclass
class HabitChanges:
    title: str
    progress_marker: str


@dataclass
class UpdateProfileInput:
    user_id: int
    display_name: str
    habits: Dict[int, HabitChanges] = field(default_factory=dict)


class UpdateProfileUseCase:
    def __init__(self, habit_repository: IHabitRepository, profile_repository: IProfileRepository):
        self.habit_repository = habit_repository
        self.profile_repository = profile_repository

    def execute(self, input_dto: UpdateProfileInput) -> List[HabitEntity]:
        display_name = _required(input_dto.display_name, 'display_name', "Display name cannot be empty.")

        # Najpierw walidacja wszystkiego, potem zapisy
        updates = []
        for habit_id, changes in input_dto.habits.items():
            title = _required(changes.title, 'title', "Goal name cannot be empty.")
            marker = _required(changes.progress_marker, 'progress_marker', "Emoji cannot be empty.")
            habit = _load_own_habit(self.habit_repository, habit_id, input_dto.user_id)
            habit.title = title
            habit.progress_marker = marker
            updates.append(habit)

        self.profile_repository.set_display_name(input_dto.user_id, display_name)
        saved = [self.habit_repository.save(h) for h in updates]

        logger.info("User %s updated profile (%d goals)", input_dto.user_id, len(saved))
        return saved

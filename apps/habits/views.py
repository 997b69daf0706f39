# apps/habits/views.py
from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import QueryDict
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from .adapters.clock import SystemClock
from .adapters.orm_repositories import DjangoCompletionLogStore, DjangoHabitRepository, DjangoProfileRepository
from .application.use_cases import (
    ComposeGridUseCase,
    CreateHabitInput,
    CreateHabitUseCase,
    LogCompletionInput,
    LogCompletionUseCase,
    LogStatus,
)
from .domain.entities import Cadence, Grid, LayoutPolicy
from .domain.exceptions import HabitError, StoreError
from .domain.services import GridComposer
from .filters import HabitFilter
from .models import Habit


def _grid_policy() -> LayoutPolicy:
    try:
        return LayoutPolicy(getattr(settings, 'HABIT_GRID_LAYOUT', LayoutPolicy.SQUARE.value))
    except ValueError:
        return LayoutPolicy.SQUARE


def _grid_url(query: str) -> str:
    # Powrót na siatkę z tymi samymi filtrami
    url = reverse('habit_grid')
    query = QueryDict(query).urlencode()
    return f"{url}?{query}" if query else url


@login_required
def grid_view(request):
    """Wspólna siatka postępów całej grupy."""
    policy = _grid_policy()
    habit_filter = HabitFilter(request.GET or None, queryset=Habit.objects.filter(is_public=True))

    # Złożenie Use Case (Manual Dependency Injection)
    use_case = ComposeGridUseCase(
        habit_repository=DjangoHabitRepository(),
        profile_repository=DjangoProfileRepository(),
        store=DjangoCompletionLogStore(),
        composer=GridComposer(
            policy=policy,
            placeholder=getattr(settings, 'HABIT_NAME_PLACEHOLDER', 'Someone'),
        ),
    )

    try:
        grid = use_case.execute(viewer_id=request.user.id, filters=request.GET)
    except StoreError as e:
        # Nigdy nie wywracamy widoku - pusta siatka + komunikat
        messages.error(request, str(e) or "Something went wrong.")
        grid = Grid.empty(policy)

    return render(request, 'habits/grid.html', {
        'grid': grid,
        'filter': habit_filter,
    })


@require_POST
@login_required
def habit_log_view(request, pk):
    """'I did it!' - zapis wykonania w bieżącym okresie."""
    use_case = LogCompletionUseCase(
        habit_repository=DjangoHabitRepository(),
        store=DjangoCompletionLogStore(),
        clock=SystemClock(),
    )

    result = use_case.execute(LogCompletionInput(habit_id=pk, user_id=request.user.id))

    if result.status == LogStatus.OK:
        messages.success(request, result.message)
    elif result.status == LogStatus.DUPLICATE:
        messages.info(request, result.message)
    else:
        messages.error(request, result.message)

    return redirect(_grid_url(request.POST.get('filters', '')))


@login_required
def onboarding_view(request):
    """Tworzenie celu (i imienia) - ustawia kafelek na siatce."""
    values = {
        'display_name': '',
        'title': 'Yoga',
        'cadence': Cadence.DAILY.value,
        'progress_marker': '🧘',
    }

    if request.method == "POST":
        values.update({key: request.POST.get(key, '') for key in values})

        use_case = CreateHabitUseCase(
            habit_repository=DjangoHabitRepository(),
            profile_repository=DjangoProfileRepository(),
        )
        try:
            use_case.execute(CreateHabitInput(
                user_id=request.user.id,
                display_name=values['display_name'],
                title=values['title'],
                cadence=values['cadence'],
                progress_marker=values['progress_marker'],
            ))
            return redirect('habit_grid')
        except HabitError as e:
            messages.error(request, str(e))

    return render(request, 'habits/onboarding.html', {
        'values': values,
        'cadences': Habit.CadenceChoices.choices,
    }, status=400 if request.method == "POST" else 200)

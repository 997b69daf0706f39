import logging

from django.contrib import messages
from django.contrib.auth import logout
from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from apps.habits.adapters.orm_repositories import DjangoHabitRepository, DjangoProfileRepository
from apps.habits.application.use_cases import HabitChanges, UpdateProfileInput, UpdateProfileUseCase
from apps.habits.domain.exceptions import HabitError

logger = logging.getLogger(__name__)


@login_required
def home_view(request):
    # Ma już cel -> siatka, inaczej onboarding
    if DjangoHabitRepository().user_has_habits(request.user.id):
        return redirect('habit_grid')
    return redirect('habit_onboarding')


@login_required
def profile_view(request):
    habit_repo = DjangoHabitRepository()
    profile_repo = DjangoProfileRepository()
    habits = habit_repo.get_for_user(request.user.id)

    display_name = profile_repo.get_display_name(request.user.id)
    titles = {h.id: h.title for h in habits}
    markers = {h.id: h.progress_marker for h in habits}

    if request.method == 'POST':
        display_name = request.POST.get('display_name', '')
        for h in habits:
            titles[h.id] = request.POST.get(f'title_{h.id}', '')
            markers[h.id] = request.POST.get(f'marker_{h.id}', '')

        use_case = UpdateProfileUseCase(habit_repository=habit_repo, profile_repository=profile_repo)
        try:
            with transaction.atomic():
                use_case.execute(UpdateProfileInput(
                    user_id=request.user.id,
                    display_name=display_name,
                    habits={h.id: HabitChanges(title=titles[h.id], progress_marker=markers[h.id]) for h in habits},
                ))
            messages.success(request, "Saved ✅")
            return redirect('profile')
        except HabitError as e:
            messages.error(request, str(e))

    return render(request, 'core/profile.html', {
        'display_name': display_name,
        'habits': habits,
        'titles': titles,
        'markers': markers,
    })


@require_http_methods(["POST"])
@login_required
def profile_delete_view(request):
    """Usuwa konto - cele i logi znikają kaskadowo."""
    user = request.user
    logger.info("Deleting user %s with all goals", user.id)
    logout(request)
    user.delete()
    return redirect('login')


@require_http_methods(["POST"])
def logout_view(request):
    logout(request)
    return redirect('login')

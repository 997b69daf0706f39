from datetime import date

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.habits.adapters.clock import FixedClock, SystemClock
from apps.habits.adapters.orm_repositories import DjangoCompletionLogStore, DjangoHabitRepository, DjangoProfileRepository
from apps.habits.application.use_cases import ComposeGridUseCase
from apps.habits.domain.entities import LayoutPolicy
from apps.habits.domain.services import GridComposer, period_key


class Command(BaseCommand):
    help = 'Wypisuje siatkę postępów tak, jak widzi ją użytkownik'

    def add_arguments(self, parser):
        parser.add_argument('username')
        parser.add_argument('--at', help='Data YYYY-MM-DD zamiast "teraz"')
        parser.add_argument('--layout', choices=[p.value for p in LayoutPolicy], default=LayoutPolicy.SQUARE.value)

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            viewer = User.objects.get(username=options['username'])
        except User.DoesNotExist:
            raise CommandError(f"User {options['username']!r} does not exist")

        if options['at']:
            try:
                clock = FixedClock(date.fromisoformat(options['at']))
            except ValueError:
                raise CommandError(f"Invalid date {options['at']!r}, expected YYYY-MM-DD")
        else:
            clock = SystemClock()

        use_case = ComposeGridUseCase(
            habit_repository=DjangoHabitRepository(),
            profile_repository=DjangoProfileRepository(),
            store=DjangoCompletionLogStore(),
            composer=GridComposer(
                policy=options['layout'],
                placeholder=getattr(settings, 'HABIT_NAME_PLACEHOLDER', 'Someone'),
            ),
        )
        grid = use_case.execute(viewer_id=viewer.id)
        now = clock.now()

        columns = 'auto' if grid.layout.columns is None else grid.layout.columns
        self.stdout.write(self.style.SUCCESS(
            f'{len(grid.tiles)} tiles, {columns} columns, {grid.layout.empty_slots} empty'
        ))
        for tile in grid.tiles:
            mine = '*' if tile.can_log else ' '
            self.stdout.write(
                f"{mine} {tile.display_name} - {tile.title} ({tile.cadence.value}) "
                f"total {tile.unit_label}: {tile.total} [period {period_key(tile.cadence, now)}]"
            )

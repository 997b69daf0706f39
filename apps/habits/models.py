# apps/habits/models.py
from django.db import models
from django.conf import settings
from apps.habits.domain.entities import Cadence


class Habit(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='habits')
    title = models.CharField(max_length=200)

    # TextChoices dla Admina, mapowane na Enum domenowy
    class CadenceChoices(models.TextChoices):
        DAILY = Cadence.DAILY.value, 'Daily'
        WEEKLY = Cadence.WEEKLY.value, 'Weekly'
        MONTHLY = Cadence.MONTHLY.value, 'Monthly'

    cadence = models.CharField(
        max_length=10,
        choices=CadenceChoices.choices,
        default=CadenceChoices.DAILY
    )

    # Emoji/znak, którym "stemplujemy" postęp
    progress_marker = models.CharField(max_length=16)

    is_public = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return self.title


class HabitLog(models.Model):
    habit = models.ForeignKey(Habit, on_delete=models.CASCADE, related_name='logs')

    # YYYY-MM-DD: dzień / poniedziałek tygodnia / pierwszy dzień miesiąca
    period_key = models.CharField(max_length=10)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            # Jeden wpis na okres
            models.UniqueConstraint(fields=['habit', 'period_key'], name='unique_log_per_habit_period'),
        ]

    def __str__(self):
        return f"{self.habit} @ {self.period_key}"

from django.contrib import admin
from .models import Habit, HabitLog


@admin.register(Habit)
class HabitAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'cadence', 'progress_marker', 'is_public', 'created_at')
    list_filter = ('cadence', 'is_public')
    search_fields = ('title', 'user__username')


@admin.register(HabitLog)
class HabitLogAdmin(admin.ModelAdmin):
    list_display = ('habit', 'period_key', 'created_at')
    list_filter = ('habit__cadence', 'habit')
    # Logi są tylko dopisywane
    readonly_fields = ('habit', 'period_key', 'created_at')

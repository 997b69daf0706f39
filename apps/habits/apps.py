from django.apps import AppConfig

class HabitsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.habits'  # pełna ścieżka z 'apps.'
    label = 'habits'

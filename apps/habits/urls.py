from django.urls import path
from . import views

urlpatterns = [
    path('', views.grid_view, name='habit_grid'),
    path('onboarding/', views.onboarding_view, name='habit_onboarding'),
    path('<int:pk>/log/', views.habit_log_view, name='habit_log'),
]

# shining_stars/urls.py
from django.contrib import admin
from django.urls import path, include
from apps.core import views as core_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', core_views.home_view, name='home'),  # grid albo onboarding
    path('accounts/', include('django.contrib.auth.urls')),
    path('habits/', include('apps.habits.urls')),
    path('core/', include('apps.core.urls')),
]

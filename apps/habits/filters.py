import django_filters
from django import forms
from .models import Habit


class HabitFilter(django_filters.FilterSet):
    cadence = django_filters.ChoiceFilter(
        choices=Habit.CadenceChoices.choices,
        label="Frequency",
        empty_label="All",
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    title = django_filters.CharFilter(
        lookup_expr='icontains',
        label="Goal contains",
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Search...'})
    )

    class Meta:
        model = Habit
        fields = ['cadence', 'title']

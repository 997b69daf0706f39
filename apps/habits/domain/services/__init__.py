from .period import local_date, period_key, period_start
from .aggregation import ProgressAggregator
from .grid import GridComposer, collation_key, grid_layout

__all__ = [
    'local_date',
    'period_key',
    'period_start',
    'ProgressAggregator',
    'GridComposer',
    'collation_key',
    'grid_layout',
]

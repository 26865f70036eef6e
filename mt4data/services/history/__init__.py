"""
History - бары истории MetaTrader 4 (файлы *.hst)
"""

from .constants import HISTORY_BAR_VERSIONS
from .models import HistoryBar, check_version
from .normalizer import normalize_price, check_digits
from .writer import write_history_bar, write_history_bars, read_history_bars


__all__ = [
    'HISTORY_BAR_VERSIONS',
    'HistoryBar',
    'check_version',
    'normalize_price',
    'check_digits',
    'write_history_bar',
    'write_history_bars',
    'read_history_bars',
]

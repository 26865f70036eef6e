"""
Account Export - экспорт торговой истории сигналов в *.ini файлы терминала
"""

from .models import Signal, OpenPosition, ClosedPosition, PositionSource
from .file_utils import rewrite_file
from .exporter import AccountHistoryExporter, format_value


__all__ = [
    'Signal',
    'OpenPosition',
    'ClosedPosition',
    'PositionSource',
    'rewrite_file',
    'AccountHistoryExporter',
    'format_value',
]

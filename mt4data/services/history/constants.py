"""
Константы истории
"""

from mt4data.services.struct_codec.constants import HISTORY_BAR_VERSIONS

# Формат даты в сообщении об ошибочном баре
BAR_DATE_FORMAT = "%a, %d-%b-%Y"

__all__ = ['HISTORY_BAR_VERSIONS', 'BAR_DATE_FORMAT']

"""
Константы бинарных структур терминала MetaTrader 4
"""

# Размер FXT-заголовка (тестерные тик-файлы "*.fxt")
FXT_HEADER_SIZE = 728

# Размер бара истории версии 400 (файлы истории "*.hst")
HISTORY_BAR_400_SIZE = 44

# Размер бара истории версии 401 (файлы истории "*.hst")
HISTORY_BAR_401_SIZE = 60

# Размер структуры символа (файл "symbols.raw")
SYMBOL_SIZE = 1936

# Размер группы символов (файл "symgroups.raw")
SYMBOL_GROUP_SIZE = 80

# Размер SelectedSymbol (файл "symbols.sel")
SYMBOL_SELECTED_SIZE = 128

# Поддерживаемые версии баров истории
HISTORY_BAR_VERSIONS = (400, 401)

# Диапазон uint32
UINT32_MAX = 0xFFFFFFFF

# Ширина double
DOUBLE_SIZE = 8

# Ширина uint32
UINT32_SIZE = 4

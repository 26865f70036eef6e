"""
mt4data - бинарные структуры и файлы данных терминала MetaTrader 4

- services.struct_codec: кодек структур (symbols.raw, symgroups.raw, *.hst, *.fxt)
- services.history: запись баров истории
- services.terminal: перечисления и проверки терминала
- services.account_export: экспорт торговой истории в *.ini
"""

__version__ = "1.0.0"

"""
Константы экспорта торговой истории (*.ini)
"""

# Формат времени в файлах экспорта
TIME_FORMAT = "%Y.%m.%d %H:%M:%S"

OPEN_FILE_SUFFIX = "_open.ini"
CLOSED_FILE_SUFFIX = "_closed.ini"

SECTION_PREFIX = "SimpleTrader"

OPEN_HEADER = (
    ";Symbol.Ticket   = Type,  Lots, OpenTime           , OpenPrice, TakeProfit, StopLoss, "
    "Commission, Swap, MagicNumber, Comment\n"
)

CLOSED_HEADER = (
    ";Symbol.Ticket   = Type,  Lots, OpenTime           , OpenPrice, CloseTime          , "
    "ClosePrice, TakeProfit, StopLoss, Commission, Swap,   Profit, MagicNumber, Comment\n"
)

# AUDUSD.428259953 = Sell,  1.20, 2014.04.10 07:08:46,   1.62166,           ,         ,          0,    0,            ,
OPEN_LINE_FORMAT = "{:<16} = {:<4}, {:5.2f}, {}, {:>9}, {:>10}, {:>8}, {:>10}, {:>4}, {:>11}, {}\n"

# AUDUSD.428259953 = Sell,  1.20, 2014.04.10 07:08:46,   1.62166, 2014.04.10 07:08:46,    1.62166, ...
CLOSED_LINE_FORMAT = (
    "{:<16} = {:<4}, {:5.2f}, {}, {:>9}, {}, {:>10}, {:>10}, {:>8}, {:>10}, {:>4}, {:>8}, {:>11}, {}\n"
)

"""
Errors — Таксономия исключений daiji

Все исключения наследуются от DaijiError, а также от соответствующего
встроенного исключения (ValueError / OverflowError), чтобы вызывающий код
мог ловить их как стандартные ошибки Python.

Повторы (retry) не предусмотрены: все операции детерминированы, повторный
вызов с теми же входными данными и конфигурацией даёт тот же результат.
"""


class DaijiError(Exception):
    """Базовое исключение пакета daiji."""

    pass


class MalformedNumeralError(DaijiError, ValueError):
    """
    Некорректная числовая строка.

    Возникает, если после удаления запятых/пробелов строка пуста,
    если на месте цифры стоит посторонний символ, или если поле
    экспоненты не является целым числом со знаком.
    """

    pass


class ConfigurationError(DaijiError, ValueError):
    """
    Некорректная конфигурация таблиц (слишком короткая таблица,
    глиф длиной не в один символ, нарушение JSON Schema файла конфигурации).

    Возникает синхронно в момент установки конфигурации.
    """

    pass


class LargeUnitOverflowError(DaijiError, OverflowError):
    """
    Целая часть требует имени 4-значной группы за пределами
    large_unit_names при политике OverflowPolicy.FAIL.
    """

    pass

"""
Errors — Иерархия исключений для диапазонов и прогрессий

Все исключения пакета наследуются от ProgressionError.

Виды ошибок:
- InvalidStepError: шаг нулевой или не продвигает время вперёд (только при конструировании)
- CalendarOverflowError: результат сложения вышел за пределы представимых дат
- ExhaustedSequenceError: запрошен элемент после исчерпания последовательности
- InvalidTimeZoneError: неизвестный идентификатор часового пояса

Базовые классы стандартной библиотеки (ValueError, OverflowError, StopIteration)
подмешиваются, чтобы вызывающий код мог ловить ошибки привычным образом.
"""

from typing import Any


class ProgressionError(Exception):
    """Базовая ошибка для всех ошибок диапазонов и прогрессий."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidStepError(ProgressionError, ValueError):
    """Шаг прогрессии нулевой или не является положительным продвижением во времени."""

    def __init__(self, step: Any, reason: str) -> None:
        super().__init__(f"{reason} (step={step!r})")
        self.step = step
        self.reason = reason


class CalendarOverflowError(ProgressionError, OverflowError):
    """Результат арифметики вышел за пределы представимого диапазона дат."""

    def __init__(self, operation: str, point: Any, step: Any) -> None:
        super().__init__(
            f"Calendar overflow in {operation}: {point!r} + {step!r} is out of range"
        )
        self.operation = operation
        self.point = point
        self.step = step


class ExhaustedSequenceError(ProgressionError, StopIteration):
    """
    Запрошен следующий элемент после исчерпания последовательности.

    Наследуется от StopIteration, поэтому цикл for завершается штатно.
    """

    def __init__(self, end_inclusive: Any = None) -> None:
        super().__init__(f"Sequence exhausted: no values left up to {end_inclusive!r}")
        self.end_inclusive = end_inclusive


class InvalidTimeZoneError(ProgressionError, ValueError):
    """Идентификатор часового пояса не найден в базе tz."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown timezone: {key!r}")
        self.key = key

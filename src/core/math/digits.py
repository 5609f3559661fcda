"""
Digits — Magnitude Arithmetic Primitives

Магнитуда — абсолютное значение целого числа произвольной точности,
хранимое как tuple десятичных цифр, от младшей к старшей
(least-significant digit first). Знак здесь не участвует.

Модуль содержит всю "ручную" арифметику:
- Нормализация (удаление старших нулей)
- Трёхзначное сравнение магнитуд
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Умножение столбиком (schoolbook)
- Конверсии int → digits, digits → str, str → (sign, digits)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Магнитуда никогда не пустая: ноль — это (0,)
2. Канонический вид: нет старших нулей, кроме самого нуля
3. Каждый элемент — int в диапазоне [0, 9]
4. Все функции чистые: входы не изменяются, результат — новый tuple
"""

import logging
from typing import Final, Sequence

_LOGGER = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (одна десятичная цифра на элемент)
BASE: Final[int] = 10

# Каноническая магнитуда нуля и единицы
ZERO_MAGNITUDE: Final[tuple[int, ...]] = (0,)
ONE_MAGNITUDE: Final[tuple[int, ...]] = (1,)

# Единственный допустимый префикс знака в десятичной записи
NEGATIVE_SIGN: Final[str] = "-"

DIGIT_CHARS: Final[str] = "0123456789"

# Диапазон native signed 64-bit; int в Python шире, границы нужны для тестов
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Причины отказа при разборе строки
REASON_EMPTY: Final[str] = "empty"
REASON_NO_DIGITS: Final[str] = "no_digits"
REASON_INVALID_CHARACTER: Final[str] = "invalid_character"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormatError(ValueError):
    """
    Невалидная десятичная запись целого числа.

    Возникает только при разборе строки:
    - пустая строка (reason="empty")
    - один знак "-" без цифр (reason="no_digits")
    - любой символ, кроме цифры, после необязательного "-"
      (reason="invalid_character", position указывает на символ)
    """

    def __init__(self, text: str, reason: str, position: int | None = None):
        self.text = text
        self.reason = reason
        self.position = position

        message = f"Invalid decimal integer {text!r}: {reason}"
        if position is not None:
            message += f" at position {position}"
        super().__init__(message)


# =============================================================================
# НОРМАЛИЗАЦИЯ И ВАЛИДАЦИЯ
# =============================================================================


def normalize_magnitude(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Удаление старших нулевых цифр.

    Args:
        digits: Цифры, младшая первой (могут иметь старшие нули)

    Returns:
        Канонический tuple; пустой вход или одни нули → (0,)

    Examples:
        >>> normalize_magnitude([3, 2, 1, 0, 0])
        (3, 2, 1)
        >>> normalize_magnitude([0, 0, 0])
        (0,)
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1

    if end == 0:
        return ZERO_MAGNITUDE

    return tuple(digits[:end])


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Магнитуда представляет ноль (в каноническом виде)."""
    return len(digits) == 1 and digits[0] == 0


def validate_magnitude(digits: Sequence[int], name: str = "magnitude") -> None:
    """
    Валидация канонической магнитуды.

    Args:
        digits: Проверяемая последовательность цифр
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если последовательность пустая, содержит не-цифры
            или имеет старший ноль
    """
    if len(digits) == 0:
        raise ValueError(f"{name} must contain at least one digit")

    for index, digit in enumerate(digits):
        # bool — подкласс int, но цифрой не является
        if type(digit) is not int:
            raise ValueError(
                f"{name}[{index}] must be int, got {type(digit).__name__}"
            )
        if not 0 <= digit < BASE:
            raise ValueError(f"{name}[{index}] must be in [0, 9], got {digit}")

    if len(digits) > 1 and digits[-1] == 0:
        raise ValueError(f"{name} has a most-significant zero digit")


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение магнитуд без учёта знака.

    Алгоритм:
        1. Более короткая последовательность меньше
        2. При равной длине — поцифровое сравнение от старшей к младшей,
           результат по первому различию

    Args:
        a: Первая каноническая магнитуда
        b: Вторая каноническая магнитуда

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|

    Examples:
        >>> compare_magnitudes((9,), (0, 1))
        -1
        >>> compare_magnitudes((1, 2, 3), (1, 2, 3))
        0
        >>> compare_magnitudes((0, 0, 5), (9, 9, 4))
        1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for index in range(len(a) - 1, -1, -1):
        if a[index] != b[index]:
            return -1 if a[index] < b[index] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Поцифровое сложение магнитуд с переносом.

    Цикл идёт, пока у любого операнда остались цифры или есть перенос;
    финальный перенос добавляет новую старшую цифру.
    Длина результата <= max(len(a), len(b)) + 1.

    Examples:
        >>> add_magnitudes((9, 9, 9), (1,))
        (0, 0, 0, 1)
        >>> add_magnitudes((5,), (7,))
        (2, 1)
    """
    result: list[int] = []
    carry = 0
    index = 0

    while index < len(a) or index < len(b) or carry:
        total = carry
        if index < len(a):
            total += a[index]
        if index < len(b):
            total += b[index]

        carry, digit = divmod(total, BASE)
        result.append(digit)
        index += 1

    return normalize_magnitude(result)


def sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Поцифровое вычитание |a| - |b| с заёмом.

    Вызывающий код гарантирует |a| >= |b|: уменьшаемое задаёт длину
    итерации. Если разряд уходит в минус, занимаем 10 из следующего.

    Args:
        a: Уменьшаемое (большая или равная магнитуда)
        b: Вычитаемое

    Returns:
        Нормализованная разность (старшие нули удалены)

    Raises:
        ValueError: Если |a| < |b|

    Examples:
        >>> sub_magnitudes((0, 0, 0, 1), (1,))
        (9, 9, 9)
        >>> sub_magnitudes((4, 2), (4, 2))
        (0,)
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("sub_magnitudes requires |a| >= |b|")

    result: list[int] = []
    borrow = 0

    for index in range(len(a)):
        digit = a[index] - borrow
        if index < len(b):
            digit -= b[index]

        if digit < 0:
            digit += BASE
            borrow = 1
        else:
            borrow = 0

        result.append(digit)

    return normalize_magnitude(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Умножение магнитуд столбиком (schoolbook).

    Результат заранее выделен длиной len(a) + len(b) и заполнен нулями.
    Для каждой пары (i, j): result[i+j] += a[i] * b[j] + carry, перенос
    уходит в позицию i+j+1. Внутренний цикл продолжается за концом b,
    пока перенос ненулевой.

    Examples:
        >>> mul_magnitudes((2, 1), (2, 1))
        (4, 4, 1)
        >>> mul_magnitudes((9, 9, 9), (0,))
        (0,)
    """
    result = [0] * (len(a) + len(b))

    for i, a_digit in enumerate(a):
        carry = 0
        j = 0
        while j < len(b) or carry:
            b_digit = b[j] if j < len(b) else 0
            product = result[i + j] + a_digit * b_digit + carry
            carry, result[i + j] = divmod(product, BASE)
            j += 1

    return normalize_magnitude(result)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def magnitude_from_int(value: int) -> tuple[int, ...]:
    """
    Магнитуда abs(value): остаток от деления на 10, пока значение не ноль.

    Python int не переполняется при взятии abs, поэтому INT64_MIN
    обрабатывается так же, как любое другое значение.

    Examples:
        >>> magnitude_from_int(-1230)
        (0, 3, 2, 1)
        >>> magnitude_from_int(0)
        (0,)
    """
    value = abs(value)
    if value == 0:
        return ZERO_MAGNITUDE

    digits: list[int] = []
    while value > 0:
        value, digit = divmod(value, BASE)
        digits.append(digit)

    return tuple(digits)


def magnitude_to_int(digits: Sequence[int]) -> int:
    """Сборка native int из магнитуды (Horner, от старшей цифры)."""
    value = 0
    for digit in reversed(digits):
        value = value * BASE + digit
    return value


def magnitude_to_str(digits: Sequence[int]) -> str:
    """
    Десятичная запись магнитуды: цифры от старшей к младшей.

    Examples:
        >>> magnitude_to_str((0, 0, 1))
        '100'
    """
    return "".join(DIGIT_CHARS[digit] for digit in reversed(digits))


def parse_decimal(text: str) -> tuple[bool, tuple[int, ...]]:
    """
    Разбор десятичной записи со знаком.

    Формат: необязательный "-" и затем одна или более цифр 0-9.
    "+", пробелы, разделители групп и unicode-цифры не допускаются.
    Результат нормализован: "-0" и "000" дают (False, (0,)).

    Args:
        text: Десятичная строка

    Returns:
        (negative, magnitude)

    Raises:
        TypeError: Если text не str
        InvalidFormatError: Пустая строка, знак без цифр, не-цифра

    Examples:
        >>> parse_decimal("-120")
        (True, (0, 2, 1))
        >>> parse_decimal("-000")
        (False, (0,))
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    if not text:
        _LOGGER.debug("Rejected decimal literal %r: %s", text, REASON_EMPTY)
        raise InvalidFormatError(text, REASON_EMPTY)

    negative = text[0] == NEGATIVE_SIGN
    start = 1 if negative else 0

    if start == len(text):
        _LOGGER.debug("Rejected decimal literal %r: %s", text, REASON_NO_DIGITS)
        raise InvalidFormatError(text, REASON_NO_DIGITS)

    digits: list[int] = []
    for position in range(start, len(text)):
        char = text[position]
        digit = DIGIT_CHARS.find(char)
        if digit < 0:
            _LOGGER.debug(
                "Rejected decimal literal %r: %s at position %d",
                text,
                REASON_INVALID_CHARACTER,
                position,
            )
            raise InvalidFormatError(text, REASON_INVALID_CHARACTER, position)
        digits.append(digit)

    digits.reverse()
    magnitude = normalize_magnitude(digits)

    # Нет отрицательного нуля
    if is_zero_magnitude(magnitude):
        negative = False

    return negative, magnitude

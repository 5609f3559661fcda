"""
BigInt — Целое число произвольной точности со знаком

Immutable Pydantic модель: магнитуда (десятичные цифры, младшая первой)
и флаг знака. Вся цифровая арифметика делегирована в
src.core.math.digits, здесь только диспетчеризация по знакам.

Конструкторы:
- BigInt()             → 0
- BigInt(-42)          → из native int
- BigInt("-42")        → из десятичной строки (InvalidFormatError)
- BigInt(magnitude=(2, 4), negative=True) → из канонических полей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Магнитуда каноническая (нет старших нулей, не пустая)
2. Нет отрицательного нуля: ноль всегда negative=False
3. Равенство значений ⇔ равенство (magnitude, negative)
4. Каждая операция возвращает новый экземпляр
"""

from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.math.digits import (
    NEGATIVE_SIGN,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    add_magnitudes,
    compare_magnitudes,
    is_zero_magnitude,
    magnitude_from_int,
    magnitude_to_int,
    magnitude_to_str,
    mul_magnitudes,
    normalize_magnitude,
    parse_decimal,
    sub_magnitudes,
    validate_magnitude,
)


# =============================================================================
# ENUMS
# =============================================================================


class ArithmeticOp(str, Enum):
    """Знаковая операция над двумя BigInt"""

    ADD = "add"
    SUB = "sub"


class MagnitudeRoute(str, Enum):
    """Во что сводится знаковая операция на уровне магнитуд"""

    SUM = "sum"  # |a| + |b|, знак a
    DIFFERENCE = "difference"  # ||a| - |b||, знак a либо инвертированный


# =============================================================================
# SIGN DISPATCH
# =============================================================================

# (операция, знаки совпадают) → маршрут по магнитудам
#
#   a + b, знаки равны    → SUM,        знак = sign(a)
#   a + b, знаки разные   → DIFFERENCE, знак = sign(a), инверсия при |a| < |b|
#   a - b, знаки равны    → DIFFERENCE, знак = sign(a), инверсия при |a| < |b|
#   a - b, знаки разные   → SUM,        знак = sign(a)
#
# Ноль всегда нормализуется в negative=False.
SIGN_DISPATCH: Final[dict[tuple[ArithmeticOp, bool], MagnitudeRoute]] = {
    (ArithmeticOp.ADD, True): MagnitudeRoute.SUM,
    (ArithmeticOp.ADD, False): MagnitudeRoute.DIFFERENCE,
    (ArithmeticOp.SUB, True): MagnitudeRoute.DIFFERENCE,
    (ArithmeticOp.SUB, False): MagnitudeRoute.SUM,
}


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Целое число произвольной точности.

    Immutable модель (frozen=True): арифметика и сравнения не изменяют
    операнды. `a += b` просто перепривязывает имя к новому значению.
    """

    magnitude: tuple[int, ...] = Field(
        default=ZERO_MAGNITUDE,
        description="Десятичные цифры абсолютного значения, младшая первой",
    )
    negative: bool = Field(
        default=False, strict=True, description="True для отрицательного числа"
    )

    # Immutable; опечатка в имени поля — ошибка, а не молчаливый ноль
    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, value: "BigInt | int | str | None" = None, /, **data: Any):
        if value is not None:
            if data:
                raise TypeError(
                    "BigInt() takes either a positional value or field keywords, not both"
                )
            negative, magnitude = _parts_of(value)
            data = {"magnitude": magnitude, "negative": negative}
        super().__init__(**data)

    @field_validator("magnitude", mode="before")
    @classmethod
    def validate_canonical_magnitude(cls, v: Any) -> tuple[int, ...]:
        """
        Магнитуда принимается только в каноническом виде.

        Старшие нули не срезаются молча: вызывающий код, который строит
        BigInt из полей, обязан передать нормализованные цифры.
        """
        if not isinstance(v, (tuple, list)):
            raise ValueError(
                f"magnitude must be a tuple of digits, got {type(v).__name__}"
            )
        validate_magnitude(v)
        return tuple(v)

    @field_validator("negative")
    @classmethod
    def normalize_zero_sign(cls, v: bool, info: ValidationInfo) -> bool:
        """Нет отрицательного нуля."""
        magnitude = info.data.get("magnitude")
        if magnitude is not None and is_zero_magnitude(magnitude):
            return False
        return v

    def model_copy(
        self, *, update: dict[str, Any] | None = None, deep: bool = False
    ) -> "BigInt":
        """
        Копия с изменёнными полями.

        В отличие от BaseModel.model_copy, update проходит полную
        валидацию: отрицательный ноль и неканоническая магнитуда невозможны.
        """
        if not update:
            return super().model_copy(deep=deep)
        data = {"magnitude": self.magnitude, "negative": self.negative}
        data.update(update)
        return type(self)(**data)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigInt":
        """Каноничный ноль."""
        return cls(magnitude=ZERO_MAGNITUDE, negative=False)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Конструктор из native int.

        Args:
            value: Любой int (signed 64-bit — частный случай)

        Raises:
            TypeError: Если value не int (bool отклоняется)
        """
        if type(value) is bool or not isinstance(value, int):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        return cls(magnitude=magnitude_from_int(value), negative=value < 0)

    @classmethod
    def from_str(cls, text: str) -> "BigInt":
        """
        Конструктор из десятичной строки.

        Raises:
            InvalidFormatError: Пустая строка, "-" без цифр, не-цифра
        """
        negative, magnitude = parse_decimal(text)
        return cls(magnitude=magnitude, negative=negative)

    @classmethod
    def of(cls, value: "BigInt | int | str") -> "BigInt":
        """Приведение BigInt | int | str к BigInt."""
        if isinstance(value, BigInt):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        return cls.from_int(value)

    @classmethod
    def _from_parts(cls, negative: bool, digits: tuple[int, ...]) -> "BigInt":
        # Результаты арифметики: normalize перед валидацией
        return cls(magnitude=normalize_magnitude(digits), negative=negative)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    @property
    def is_negative(self) -> bool:
        return self.negative

    @property
    def is_positive(self) -> bool:
        return not self.negative and not self.is_zero

    @property
    def sign(self) -> int:
        """-1, 0 или +1."""
        if self.is_zero:
            return 0
        return -1 if self.negative else 1

    @property
    def digit_count(self) -> int:
        """Количество десятичных цифр (у нуля — одна)."""
        return len(self.magnitude)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _combine(self, other: "BigInt", op: ArithmeticOp) -> "BigInt":
        """
        Знаковое сложение/вычитание через SIGN_DISPATCH.

        DIFFERENCE всегда вычитает меньшую магнитуду из большей;
        если |self| < |other|, знак результата инвертируется.
        """
        route = SIGN_DISPATCH[(op, self.negative == other.negative)]

        if route is MagnitudeRoute.SUM:
            return self._from_parts(
                self.negative, add_magnitudes(self.magnitude, other.magnitude)
            )

        if compare_magnitudes(self.magnitude, other.magnitude) < 0:
            return self._from_parts(
                not self.negative, sub_magnitudes(other.magnitude, self.magnitude)
            )
        return self._from_parts(
            self.negative, sub_magnitudes(self.magnitude, other.magnitude)
        )

    def add(self, other: "BigInt | int") -> "BigInt":
        return self._combine(BigInt.of(other), ArithmeticOp.ADD)

    def subtract(self, other: "BigInt | int") -> "BigInt":
        return self._combine(BigInt.of(other), ArithmeticOp.SUB)

    def multiply(self, other: "BigInt | int") -> "BigInt":
        """Умножение столбиком; знак = XOR знаков, ноль без знака."""
        other = BigInt.of(other)
        return self._from_parts(
            self.negative != other.negative,
            mul_magnitudes(self.magnitude, other.magnitude),
        )

    def negate(self) -> "BigInt":
        return self._from_parts(not self.negative, self.magnitude)

    def succ(self) -> "BigInt":
        """self + 1"""
        return self._combine(_ONE, ArithmeticOp.ADD)

    def pred(self) -> "BigInt":
        """self - 1"""
        return self._combine(_ONE, ArithmeticOp.SUB)

    def __add__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._combine(rhs, ArithmeticOp.ADD)

    def __radd__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._combine(self, ArithmeticOp.ADD)

    def __sub__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._combine(rhs, ArithmeticOp.SUB)

    def __rsub__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._combine(self, ArithmeticOp.SUB)

    def __mul__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply(rhs)

    def __rmul__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.multiply(self)

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        if not self.negative:
            return self
        return self.negate()

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInt | int") -> int:
        """
        Трёхзначное сравнение со знаком.

        Сначала знак (отрицательное < неотрицательного), затем магнитуды;
        для двух отрицательных порядок магнитуд инвертируется.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        other = BigInt.of(other)

        if self.negative != other.negative:
            return -1 if self.negative else 1

        result = compare_magnitudes(self.magnitude, other.magnitude)
        return -result if self.negative else result

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        # Канонический вид: равенство полей ⇔ равенство значений
        return self.negative == rhs.negative and self.magnitude == rhs.magnitude

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    def __hash__(self) -> int:
        # Совпадает с hash(int) для равных значений: BigInt(5) == 5
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        value = magnitude_to_int(self.magnitude)
        return -value if self.negative else value

    def to_decimal_string(self) -> str:
        """
        Десятичная запись: "-" для отрицательных, затем цифры от старшей.

        Ноль — всегда "0", без знака и без ведущих нулей.
        """
        digits = magnitude_to_str(self.magnitude)
        if self.negative:
            return NEGATIVE_SIGN + digits
        return digits

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_decimal_string()}')"


# =============================================================================
# HELPERS
# =============================================================================


def _parts_of(value: Any) -> tuple[bool, tuple[int, ...]]:
    """(negative, magnitude) для позиционного аргумента BigInt(...)."""
    if isinstance(value, BigInt):
        return value.negative, value.magnitude
    if isinstance(value, str):
        return parse_decimal(value)
    if type(value) is bool or not isinstance(value, int):
        raise TypeError(
            f"BigInt() argument must be BigInt, int or str, got {type(value).__name__}"
        )
    return value < 0, magnitude_from_int(value)


def _coerce(value: object) -> BigInt | None:
    """Операнд для операторов: BigInt или int; иначе None (→ NotImplemented)."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and type(value) is not bool:
        return BigInt.from_int(value)
    return None


_ONE: Final[BigInt] = BigInt(magnitude=ONE_MAGNITUDE, negative=False)

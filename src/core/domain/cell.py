"""BigIntCell — изменяемая привязка к BigInt.

В Python нет операторов ++/--, а `a += b` для immutable BigInt лишь
перепривязывает имя. BigIntCell держит текущее значение и даёт
prefix/postfix increment/decrement и in-place составное присваивание:
каждая операция целиком заменяет хранимое значение новым BigInt.

Не потокобезопасен: общий cell синхронизирует вызывающий код.
"""

from src.core.domain.bigint import BigInt


class BigIntCell:
    """Изменяемая ячейка со значением BigInt.

    Пример:
        >>> counter = BigIntCell(999)
        >>> counter.post_increment()
        BigInt('999')
        >>> counter.value
        BigInt('1000')
    """

    def __init__(self, value: BigInt | int | str | None = None):
        """
        Args:
            value: начальное значение (default 0)
        """
        self._value = BigInt.zero() if value is None else BigInt.of(value)

    @property
    def value(self) -> BigInt:
        return self._value

    @value.setter
    def value(self, value: BigInt | int | str) -> None:
        self._value = BigInt.of(value)

    # ++x / --x: возвращают новое значение

    def pre_increment(self) -> BigInt:
        self._value = self._value.succ()
        return self._value

    def pre_decrement(self) -> BigInt:
        self._value = self._value.pred()
        return self._value

    # x++ / x--: возвращают значение до операции

    def post_increment(self) -> BigInt:
        previous = self._value
        self._value = previous.succ()
        return previous

    def post_decrement(self) -> BigInt:
        previous = self._value
        self._value = previous.pred()
        return previous

    def __iadd__(self, other: BigInt | int) -> "BigIntCell":
        self._value = self._value + BigInt.of(other)
        return self

    def __isub__(self, other: BigInt | int) -> "BigIntCell":
        self._value = self._value - BigInt.of(other)
        return self

    def __imul__(self, other: BigInt | int) -> "BigIntCell":
        self._value = self._value * BigInt.of(other)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigIntCell):
            return self._value == other._value
        return self._value.__eq__(other)

    # Изменяемый объект: не hashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigIntCell({self._value.to_decimal_string()!r})"

"""Exact money arithmetic for session cost sharing.

Money wraps an exact rational (fractions.Fraction). Values parse from decimal
text and render back to decimal text; a float never takes part in arithmetic.
On the wire a value with no finite decimal expansion travels as an exact
"numerator/denominator" ratio (10 / 3 -> "10/3"), and parses back unchanged.
Rounding happens only through round_to / round_to_step / format, so a
per-participant share such as 10 / 3 still multiplies back to exactly 10.

All values are in a single currency, displayed with CURRENCY_SYMBOL.
"""

import math
import re
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext
from fractions import Fraction
from functools import total_ordering
from typing import Any, Union

from pydantic_core import core_schema

from config.settings import settings
from src.sl_common.enums import Comparison, RoundingMode
from src.sl_common.errors import DivisionByZeroError, InvalidAmountError

CURRENCY_SYMBOL = "$"
MIN_SIGNIFICANT_DIGITS = 10

# Plain decimal numeral after stripping symbol, separators and whitespace.
_NUMERAL_RE = re.compile(r"^(?P<sign>[+-]?)(?P<digits>\d+(?:\.\d*)?|\.\d+)$")
# Exact wire form for values with no finite decimal expansion, e.g. "-10/3".
_RATIO_RE = re.compile(r"^(?P<sign>[+-]?)(?P<numerator>\d+)/(?P<denominator>\d+)$")
_STRIP_RE = re.compile(r"[$,\s]")

Scalar = Union[int, Decimal, Fraction]


def _parse_numeral(text: str) -> Fraction:
    cleaned = _STRIP_RE.sub("", text)
    ratio = _RATIO_RE.match(cleaned)
    if ratio is not None:
        denominator = int(ratio.group("denominator"))
        if denominator == 0:
            raise InvalidAmountError(text)
        value = Fraction(int(ratio.group("numerator")), denominator)
        return -value if ratio.group("sign") == "-" else value
    match = _NUMERAL_RE.match(cleaned)
    if match is None:
        raise InvalidAmountError(text)
    value = Fraction(Decimal(match.group("digits")))
    return -value if match.group("sign") == "-" else value


def _decimal_to_fraction(value: Decimal) -> Fraction:
    if not value.is_finite():
        raise InvalidAmountError(value)
    return Fraction(value)


def _scalar_to_fraction(value: object) -> Fraction:
    """Coerce an arithmetic operand. Floats are refused: use Money.parse explicitly."""
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric operand for Money")
    if isinstance(value, Money):
        return value._value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, Decimal):
        return _decimal_to_fraction(value)
    if isinstance(value, Fraction):
        return value
    if isinstance(value, float):
        raise TypeError("float operands are not allowed; use Money.parse() for float input")
    raise TypeError(f"unsupported Money operand: {type(value).__name__}")


def _round_fraction(q: Fraction, mode: RoundingMode) -> int:
    """Round a rational to an integer under the given mode."""
    floor = q.numerator // q.denominator
    remainder = q - floor  # 0 <= remainder < 1
    if remainder == 0:
        return floor
    positive = q > 0
    if mode is RoundingMode.FLOOR:
        return floor
    if mode is RoundingMode.CEILING:
        return floor + 1
    if mode is RoundingMode.DOWN:
        return floor if positive else floor + 1
    if mode is RoundingMode.UP:
        return floor + 1 if positive else floor
    half = Fraction(1, 2)
    if remainder > half:
        return floor + 1
    if remainder < half:
        return floor
    # exact tie
    if mode is RoundingMode.HALF_EVEN:
        return floor if floor % 2 == 0 else floor + 1
    return floor + 1 if positive else floor


def _terminating_exponent(denominator: int) -> int | None:
    """Smallest k with denominator | 10**k, or None if the expansion never ends."""
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


@total_ordering
class Money:
    """Immutable exact monetary amount."""

    __slots__ = ("_value",)

    _value: Fraction

    def __init__(self, value: "Money | Scalar | str" = 0) -> None:
        if isinstance(value, str):
            parsed = _parse_numeral(value)
        else:
            parsed = _scalar_to_fraction(value)
        object.__setattr__(self, "_value", parsed)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Money is immutable")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, value: object) -> "Money":
        """Parse user or wire input: str, int, float, Decimal (or an existing Money).

        Text may carry a currency symbol, thousands separators, surrounding
        whitespace and one leading sign. The exact ratio emitted by to_wire()
        ("10/3") is accepted too. NaN, Infinity, exponent notation, a zero
        denominator and empty input raise InvalidAmountError.
        """
        if isinstance(value, Money):
            return value
        if isinstance(value, bool) or value is None:
            raise InvalidAmountError(value)
        if isinstance(value, str):
            return cls._from_fraction(_parse_numeral(value))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidAmountError(value)
            # shortest round-tripping repr, never the binary expansion
            return cls._from_fraction(Fraction(Decimal(repr(value))))
        if isinstance(value, (int, Decimal, Fraction)):
            return cls._from_fraction(_scalar_to_fraction(value))
        raise InvalidAmountError(value)

    @classmethod
    def parse_formatted(cls, text: str) -> "Money":
        """Inverse of format(): parse_formatted(m.format()) == m.round_to(2)."""
        if not isinstance(text, str):
            raise InvalidAmountError(text)
        return cls._from_fraction(_parse_numeral(text))

    @classmethod
    def _from_fraction(cls, value: Fraction) -> "Money":
        money = cls.__new__(cls)
        object.__setattr__(money, "_value", value)
        return money

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Money") -> "Money":
        return Money._from_fraction(self._value + _money_value(other))

    def subtract(self, other: "Money") -> "Money":
        return Money._from_fraction(self._value - _money_value(other))

    def multiply(self, by: Scalar) -> "Money":
        if isinstance(by, Money):
            raise TypeError("cannot multiply Money by Money")
        return Money._from_fraction(self._value * _scalar_to_fraction(by))

    def divide(self, by: Scalar) -> "Money":
        if isinstance(by, Money):
            raise TypeError("cannot divide Money by Money")
        divisor = _scalar_to_fraction(by)
        if divisor == 0:
            raise DivisionByZeroError()
        return Money._from_fraction(self._value / divisor)

    def negate(self) -> "Money":
        return Money._from_fraction(-self._value)

    def abs(self) -> "Money":
        return Money._from_fraction(abs(self._value))

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "Money":
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Money":
        if isinstance(other, (Money, float, bool)) or not isinstance(other, (int, Decimal, Fraction)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Money":
        if isinstance(other, (Money, float, bool)) or not isinstance(other, (int, Decimal, Fraction)):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "Money":
        return self.negate()

    def __abs__(self) -> "Money":
        return self.abs()

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @staticmethod
    def compare(a: "Money", b: "Money") -> Comparison:
        left, right = _money_value(a), _money_value(b)
        if left < right:
            return Comparison.LESS_THAN
        if left > right:
            return Comparison.GREATER_THAN
        return Comparison.EQUAL

    def is_zero(self) -> bool:
        return self._value == 0

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._value == other._value
        if isinstance(other, (int, Decimal, Fraction)) and not isinstance(other, bool):
            return self._value == _scalar_to_fraction(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._value < other._value
        if isinstance(other, (int, Decimal, Fraction)) and not isinstance(other, bool):
            return self._value < _scalar_to_fraction(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    # ------------------------------------------------------------------
    # Rounding
    # ------------------------------------------------------------------

    def round_to(self, places: int, mode: RoundingMode = RoundingMode.HALF_UP) -> "Money":
        """Round to `places` decimal places. Never applied implicitly."""
        step = Fraction(1, 10**places) if places >= 0 else Fraction(10 ** (-places))
        return Money._from_fraction(_round_fraction(self._value / step, mode) * step)

    def round_to_step(
        self, step: "Money | Scalar", mode: RoundingMode = RoundingMode.HALF_UP
    ) -> "Money":
        """Round to a multiple of `step`, e.g. step=5 with CEILING: 12.40 -> 15."""
        step_value = _scalar_to_fraction(step)
        if step_value <= 0:
            raise InvalidAmountError(step)
        return Money._from_fraction(_round_fraction(self._value / step_value, mode) * step_value)

    # ------------------------------------------------------------------
    # Conversion / display
    # ------------------------------------------------------------------

    def to_decimal(self) -> Decimal:
        """Exact Decimal when the value terminates, else MONEY_PRECISION significant digits."""
        exponent = _terminating_exponent(self._value.denominator)
        if exponent is not None:
            scaled = self._value.numerator * (10**exponent // self._value.denominator)
            return Decimal(scaled).scaleb(-exponent)
        with localcontext() as ctx:
            ctx.prec = max(settings.MONEY_PRECISION, MIN_SIGNIFICANT_DIGITS)
            ctx.rounding = ROUND_HALF_UP
            return Decimal(self._value.numerator) / Decimal(self._value.denominator)

    def as_fraction(self) -> Fraction:
        return self._value

    def format(
        self,
        show_currency_symbol: bool = True,
        show_explicit_sign: bool = False,
        decimal_places: int = 2,
    ) -> str:
        """Display text: 1234.5 -> '$1,234.50', -10.5 -> '-$10.50', '+$10.50' with sign."""
        if decimal_places < 0:
            raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")
        rounded = self.round_to(decimal_places)
        body = format(rounded.abs().to_decimal(), f",.{decimal_places}f")
        if show_currency_symbol:
            body = f"{CURRENCY_SYMBOL}{body}"
        if rounded.is_negative():
            return f"-{body}"
        if show_explicit_sign and rounded.is_positive():
            return f"+{body}"
        return body

    def __str__(self) -> str:
        return format(self.to_decimal(), "f")

    def to_wire(self) -> str:
        """Lossless text: decimal when the value terminates, else "numerator/denominator"."""
        if _terminating_exponent(self._value.denominator) is None:
            return f"{self._value.numerator}/{self._value.denominator}"
        return str(self)

    def __repr__(self) -> str:
        return f"Money('{self}')"

    # ------------------------------------------------------------------
    # pydantic integration: accepts str / int / float on the wire, emits to_wire()
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        wire_schema = core_schema.no_info_after_validator_function(
            cls.parse,
            core_schema.union_schema(
                [core_schema.str_schema(), core_schema.int_schema(), core_schema.float_schema()]
            ),
        )
        # Decimal / Fraction must be matched before the lax float branch can claim them
        exact_schema = core_schema.no_info_after_validator_function(
            cls.parse,
            core_schema.union_schema(
                [core_schema.is_instance_schema(Decimal), core_schema.is_instance_schema(Fraction)]
            ),
        )
        return core_schema.json_or_python_schema(
            json_schema=wire_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), exact_schema, wire_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_wire, when_used="json-unless-none"
            ),
        )


def _money_value(value: object) -> Fraction:
    if not isinstance(value, Money):
        raise TypeError(f"expected Money, got {type(value).__name__}")
    return value._value


ZERO = Money(0)


def sum_money(amounts: Iterable[Money]) -> Money:
    """Exact sum; an empty iterable sums to ZERO."""
    total = ZERO
    for amount in amounts:
        total = total.add(amount)
    return total


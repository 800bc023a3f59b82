import math
import numbers
from typing import Union

from complexnum.complex_text import format_complex, parse_complex
from complexnum.errors import DivisionByZeroError

Number = Union["Complex", complex, float, int]


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


def _round_half_up(x: float, scale: float) -> float:
    scaled = x * scale
    if not math.isfinite(scaled):
        return x

    return math.floor(scaled + 0.5) / scale


class Complex:
    """
    An immutable complex number with rectangular and polar support.

    Constructors
    ------------
    Complex(a, b)              -> a + b i
    Complex(a)                 -> a + 0 i
    Complex()                  -> 0 + 0 i
    Complex.polar(r, theta)    -> r·e^{iθ}
    Complex.value_of("a + bi") -> parsed from text

    Every binary operation also accepts a plain real number (or a built-in
    ``complex``), which is coerced before computing.
    """

    __slots__ = ("_re", "_im")

    ZERO: "Complex"
    ONE: "Complex"
    NEGATIVE_ONE: "Complex"
    I: "Complex"

    # ---------- construction ----------
    def __init__(self, re: float = 0.0, im: float = 0.0):
        object.__setattr__(self, "_re", float(re))
        object.__setattr__(self, "_im", float(im))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._re, self._im))

    @classmethod
    def polar(cls, radius: float, angle: float) -> "Complex":
        """Build r·e^{iθ} from a radius and an angle in radians."""
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    @classmethod
    def value_of(cls, value: "Number | str") -> "Complex":
        """
        Convert a number or its text form to a Complex.

        A Complex is returned unchanged, real numbers get a zero imaginary
        part, and strings are parsed ("3 - 4i", "i", "5", ...).

        Raises MalformedInputError when a string cannot be parsed.
        """
        if isinstance(value, str):
            return cls(*parse_complex(value))

        return _coerce(value)

    # ---------- basic properties ----------
    @property
    def re(self) -> float:
        return self._re

    @property
    def im(self) -> float:
        return self._im

    # aliases matching Python's numeric tower
    real = re
    imag = im

    def is_zero(self) -> bool:
        return self._re == 0 and self.is_real()

    def is_real(self) -> bool:
        return self._im == 0

    def is_imaginary(self) -> bool:
        """True when the imaginary part is nonzero (not necessarily purely imaginary)."""
        return not self.is_real()

    def abs(self) -> float:
        return math.hypot(self._re, self._im)

    magnitude = abs

    def arg(self) -> float:
        """
        Principal argument in radians, in the range (-π, π].

        Negative reals give +π. Raises DivisionByZeroError for zero, where
        the argument is undefined.
        """
        if self.is_zero():
            raise DivisionByZeroError("argument of zero is undefined")

        x, y = self._re, self._im
        if x == 0:
            return _sign(y) * math.pi / 2

        quadrant = (1 - _sign(x)) * (1 + _sign(y) + (0 if y == 0 else -1))
        return math.atan(y / x) + quadrant * math.pi / 2

    comp_arg = arg

    # ---------- arithmetic helpers ----------
    def add(self, other: "Number") -> "Complex":
        z = _coerce(other)
        return Complex(self._re + z._re, self._im + z._im)

    def subtract(self, other: "Number") -> "Complex":
        z = _coerce(other)
        return Complex(self._re - z._re, self._im - z._im)

    def multiply(self, other: "Number") -> "Complex":
        z = _coerce(other)
        return Complex(self._re * z._re - self._im * z._im,
                       self._re * z._im + self._im * z._re)

    def divide(self, other: "Number") -> "Complex":
        """
        Multiply by the divisor's conjugate over its squared magnitude.

        The divisor is scaled by its larger component first so the squared
        magnitude cannot underflow to zero for tiny nonzero divisors.
        """
        z = _coerce(other)
        if z.is_zero():
            raise DivisionByZeroError()

        scale = max(abs(z._re), abs(z._im))
        c, d = z._re / scale, z._im / scale
        denominator = c * c + d * d
        return Complex((self._re * c + self._im * d) / denominator / scale,
                       (-self._re * d + self._im * c) / denominator / scale)

    def conjugate(self) -> "Complex":
        return Complex(self._re, -self._im)

    def reciprocal(self) -> "Complex":
        return ONE.divide(self)

    def pow(self, n: int) -> "Complex":
        """
        Integer power by repeated multiplication (n > 0) or division (n < 0).

        ``z.pow(0)`` is ONE for every z; a negative power of zero raises
        DivisionByZeroError.
        """
        if not isinstance(n, numbers.Integral):
            raise TypeError(f"exponent must be an integer, not {type(n).__name__}")

        result = ONE
        for _ in range(abs(int(n))):
            result = result.multiply(self) if n > 0 else result.divide(self)

        return result

    # ---------- transcendental functions ----------
    def exp(self) -> "Complex":
        try:
            scale = math.exp(self._re)

        except OverflowError:
            scale = math.inf

        return Complex(scale * math.cos(self._im), scale * math.sin(self._im))

    def _exp_pair(self) -> "tuple[Complex, Complex]":
        # e^{iz} and e^{-iz}
        return (Complex(-self._im, self._re).exp(),
                Complex(self._im, -self._re).exp())

    def sin(self) -> "Complex":
        a, b = self._exp_pair()
        return Complex((a._im - b._im) / 2, (b._re - a._re) / 2)

    def cos(self) -> "Complex":
        a, b = self._exp_pair()
        return Complex((a._re + b._re) / 2, (a._im + b._im) / 2)

    def tan(self) -> "Complex":
        return self.sin().divide(self.cos())

    def sqrt(self) -> "Complex":
        """
        Principal square root, the one with a non-negative real part.

        Negative reals map onto the non-negative imaginary axis, so
        ``Complex(-4).sqrt() == Complex(0, 2)``.
        """
        c, d = self._re, self._im
        t = c + math.sqrt(c * c + d * d)
        if c <= 0 and d == 0:
            return Complex(math.sqrt(t / 2), math.sqrt(-c) + 0.0)

        if t == 0:
            # d is too small to register against a negative c
            im = math.sqrt(-c)
            return Complex(abs(d) / (2 * im), math.copysign(im, d))

        return Complex(math.sqrt(t / 2), d / math.sqrt(2 * t))

    def round(self, places: int = 0) -> "Complex":
        """
        Round each part half-up to ``places`` decimal places.

        Infinite and NaN parts, and parts too large to scale, come back unchanged.
        """
        scale = 10.0 ** places
        return Complex(_round_half_up(self._re, scale), _round_half_up(self._im, scale))

    # ---------- dunder sugar ----------
    __abs__ = abs
    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide
    __pow__ = pow

    def __rsub__(self, other: "Number") -> "Complex":
        return _coerce(other).subtract(self)

    def __rtruediv__(self, other: "Number") -> "Complex":
        return _coerce(other).divide(self)

    def __neg__(self) -> "Complex":
        return Complex(-self._re, -self._im)

    def __pos__(self) -> "Complex":
        return self

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if not isinstance(other, numbers.Number):
            return NotImplemented

        z = _coerce(other)
        return self._re == z._re and self._im == z._im

    def __hash__(self) -> int:
        # agrees with hash(2) == hash(2.0) == hash(2 + 0j)
        return hash(complex(self._re, self._im))

    # float() and int() take the real part
    def __complex__(self) -> complex:
        return complex(self._re, self._im)

    def __float__(self) -> float:
        return self._re

    def __int__(self) -> int:
        return int(self._re)

    def __str__(self) -> str:
        return format_complex(self._re, self._im)

    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"


def _coerce(value: "Number") -> Complex:
    if isinstance(value, Complex):
        return value

    if isinstance(value, numbers.Real):
        return Complex(float(value), 0.0)

    if isinstance(value, numbers.Complex):
        return Complex(value.real, value.imag)

    # other registered numbers such as Decimal
    if isinstance(value, numbers.Number):
        return Complex(float(value), 0.0)

    raise TypeError(f"cannot convert {type(value).__name__} to Complex")


ZERO = Complex(0, 0)
ONE = Complex(1, 0)
NEGATIVE_ONE = Complex(-1, 0)
I = Complex(0, 1)

Complex.ZERO = ZERO
Complex.ONE = ONE
Complex.NEGATIVE_ONE = NEGATIVE_ONE
Complex.I = I

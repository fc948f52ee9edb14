"""Class for representing polynomials of one variable with real coefficients.

Polynomials are immutable values.  Every arithmetic operator returns a new
Polynomial in canonical form (see `canonicalize`), named after its operands
so that the origin of a result can be traced, e.g. "((p + q) * 2.0)".

Division is only defined by a scalar.  Dividing by a polynomial, or dividing
a scalar by a polynomial, raises UnsupportedOperation.
"""

import functools
import math
import numbers

# Coefficients with magnitude at or below this value are treated as zero.
EPSILON = 1e-10

DEFAULT_NAME = "p"

class UnsupportedOperation(TypeError):
    pass

def canonicalize(coefficients):
    """Return the canonical coefficient tuple for `coefficients`.

    Entries whose magnitude is at most EPSILON become exactly 0.0, then
    trailing zeros are removed.  The empty tuple is the zero polynomial.
    """
    coefficients = [0.0 if abs(c) <= EPSILON else float(c) for c in coefficients]
    while coefficients and coefficients[-1] == 0:
        coefficients.pop()
    return tuple(coefficients)

def _is_scalar(x):
    return isinstance(x, numbers.Real)

@functools.total_ordering
class Polynomial(object):
    """A polynomial c0 + c1*x + c2*x^2 + ...

    The coefficients are stored in increasing order of the power of x, so the
    coefficient of x^i is at index i.  For instance, 12.8x^5 - 1.62x^2 + 33x
    - 7.31 is stored as (-7.31, 33.0, -1.62, 0.0, 0.0, 12.8).

    The `name` is a free-form display label.  It may be overwritten at any
    time and takes no part in equality or hashing.
    """
    __slots__ = ("_coefficients", "name")

    def __init__(self, coefficients=(), name=DEFAULT_NAME):
        self._coefficients = canonicalize(coefficients)
        self.name = name

    @classmethod
    def from_coefficients(cls, coefficients, name=None):
        return cls(coefficients, DEFAULT_NAME if name is None else name)

    @property
    def coefficients(self):
        return self._coefficients

    def __hash__(self):
        return hash(self._coefficients)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __lt__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self._coefficients) != len(other._coefficients):
            return len(self._coefficients) < len(other._coefficients)
        for i in reversed(range(len(self._coefficients))):
            self_term = self._coefficients[i]
            other_term = other._coefficients[i]
            if self_term < other_term:
                return True
            if other_term < self_term:
                return False
        return False

    def __str__(self):
        if not self._coefficients:
            return "0"
        s = ""
        for i in reversed(range(len(self._coefficients))):
            c = self._coefficients[i]
            if c == 0:
                continue
            magnitude = abs(c)
            multiplier = "" if (magnitude == 1 and i > 0) else "{:g}".format(magnitude)
            power = "" if i == 0 else "x" if i == 1 else "x^{}".format(i)
            if not s:
                s = ("-" if c < 0 else "") + multiplier + power
            else:
                s += " {} {}{}".format("-" if c < 0 else "+", multiplier, power)
        return s

    def __repr__(self):
        return "Polynomial({!r}, name={!r})".format(self._coefficients, self.name)

    def degree(self):
        """The highest power with a non-zero coefficient; -1 for the zero polynomial."""
        return len(self._coefficients) - 1

    def get_coefficient(self, i):
        if i >= len(self._coefficients):
            return 0.0
        return self._coefficients[i]

    def evaluate(self, x):
        """Evaluate at `x` using Horner's method.

        12.8x^5 - 1.62x^2 + 33x - 7.31 is computed as
        ((((12.8x + 0)x + 0)x - 1.62)x + 33)x - 7.31.
        """
        result = 0.0
        for coefficient in reversed(self._coefficients):
            result = result * x + coefficient
        return result

    def __call__(self, x):
        return self.evaluate(x)

    def __neg__(self):
        return Polynomial((-c for c in self._coefficients), "(-{})".format(self.name))

    def __add__(self, other):
        if isinstance(other, Polynomial) or _is_scalar(other):
            return add(self, other)
        return NotImplemented

    def __radd__(self, other):
        if _is_scalar(other):
            return _shift_constant(self._coefficients, other, "({} + {})".format(other, self.name))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Polynomial) or _is_scalar(other):
            return subtract(self, other)
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return _shift_constant(
                [-c for c in self._coefficients], other,
                "({} - {})".format(other, self.name))
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Polynomial) or _is_scalar(other):
            return multiply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return Polynomial(
                (c * other for c in self._coefficients),
                "({} * {})".format(other, self.name))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Polynomial):
            raise UnsupportedOperation(
                "cannot divide {} by the polynomial {}; only division by a scalar is supported".format(self.name, other.name))
        if _is_scalar(other):
            return divide_by_scalar(self, other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_scalar(other):
            raise UnsupportedOperation(
                "cannot divide {} by the polynomial {}; only division by a scalar is supported".format(other, self.name))
        return NotImplemented

def _shift_constant(coefficients, f, name):
    coefficients = list(coefficients) or [0.0]
    coefficients[0] += f
    return Polynomial(coefficients, name)

def add(p, q):
    """Return p + q, where q is a Polynomial or a scalar."""
    if not isinstance(q, Polynomial):
        return _shift_constant(p.coefficients, q, "({} + {})".format(p.name, q))
    d = max(p.degree(), q.degree())
    return Polynomial(
        (p.get_coefficient(i) + q.get_coefficient(i) for i in range(d + 1)),
        "({} + {})".format(p.name, q.name))

def subtract(p, q):
    """Return p - q, where q is a Polynomial or a scalar."""
    if not isinstance(q, Polynomial):
        return _shift_constant(p.coefficients, -q, "({} - {})".format(p.name, q))
    d = max(p.degree(), q.degree())
    return Polynomial(
        (p.get_coefficient(i) - q.get_coefficient(i) for i in range(d + 1)),
        "({} - {})".format(p.name, q.name))

def multiply(p, q):
    """Return p * q, where q is a Polynomial or a scalar.

    The product of two polynomials is the linear convolution of their
    coefficient sequences.
    """
    if not isinstance(q, Polynomial):
        return Polynomial((c * q for c in p.coefficients), "({} * {})".format(p.name, q))
    name = "({} * {})".format(p.name, q.name)
    if not p.coefficients or not q.coefficients:
        return Polynomial((), name)
    coefficients = [0.0] * (p.degree() + q.degree() + 1)
    for k, a in enumerate(p.coefficients):
        for j, b in enumerate(q.coefficients):
            coefficients[k + j] += a * b
    return Polynomial(coefficients, name)

def _divide(c, f):
    if f != 0:
        return c / f
    if c == 0 or math.isnan(c):
        return math.nan
    return math.copysign(math.inf, c) * math.copysign(1.0, f)

def divide_by_scalar(p, f):
    """Return p / f for a scalar f.

    Division by zero follows IEEE 754: non-zero coefficients become signed
    infinities and zero or NaN coefficients become NaN.
    """
    return Polynomial((_divide(c, f) for c in p.coefficients), "({} / {})".format(p.name, f))

Polynomial.ZERO = Polynomial((), "0")
Polynomial.ONE  = Polynomial([1], "1")
Polynomial.X    = Polynomial([0, 1], "x")

"""Render floats as fractions with a bounded denominator.

Important functions:
 - approximate: closest Fraction to a float among those whose denominator
   does not exceed a bound
 - rationalize: the same, as a string "n" or "n/d"

The search follows the classical continued-fraction method (the one behind
`fractions.Fraction.limit_denominator`): the float is first scaled to a
fraction with denominator SCALE, whose convergents are then walked until the
next one would exceed the bound.  The best answer is then either the last
convergent or the largest semiconvergent that still fits.
"""

from fractions import Fraction
import math

from lagrange.opts import Option

DEFAULT_MAX_DENOMINATOR = 1000000

# Denominator of the initial approximation.  Python integers do not
# overflow, so this only bounds how many decimal places of the input count.
SCALE = 10 ** 12

max_denominator = Option("max-denominator", int, DEFAULT_MAX_DENOMINATOR,
    description="Largest denominator allowed when printing rational coefficients",
    metavar="N",
    check=lambda n: None if n >= 1 else "must be at least 1")

def approximate(value, max_denominator=DEFAULT_MAX_DENOMINATOR):
    """Return the best Fraction approximating `value` with denominator <= max_denominator.

    When the last convergent and the semiconvergent are equally close to
    `value`, the convergent (which has the smaller denominator) wins.
    """
    if max_denominator < 1:
        raise ValueError("max_denominator should be at least 1, not {}".format(max_denominator))
    if not math.isfinite(value):
        raise ValueError("cannot approximate {} by a fraction".format(value))

    if int(value) == value:
        return Fraction(int(value))

    sign = -1 if value < 0 else 1
    magnitude = abs(value)

    n = round(magnitude * SCALE)
    d = SCALE
    g = math.gcd(n, d)
    n //= g
    d //= g
    if d <= max_denominator:
        return Fraction(sign * n, d)

    # Walk the convergents p1/q1 of n/d.  This stops before n/d itself is
    # reached, since its denominator is already known to be too large.
    p0, q0, p1, q1 = 0, 1, 1, 0
    while True:
        a = n // d
        q2 = q0 + a * q1
        if q2 > max_denominator:
            break
        p0, q0, p1, q1 = p1, q1, p0 + a * p1, q2
        n, d = d, n - a * d

    k = (max_denominator - q0) // q1
    semiconvergent = Fraction(p0 + k * p1, q0 + k * q1)
    convergent = Fraction(p1, q1)
    exact = Fraction(magnitude)
    if abs(convergent - exact) <= abs(semiconvergent - exact):
        best = convergent
    else:
        best = semiconvergent
    return sign * best

def rationalize(value, max_denominator=DEFAULT_MAX_DENOMINATOR):
    """Return `value` as "n" or "n/d" with d <= max_denominator.

    Infinities and NaN have no rational form and are returned as "inf",
    "-inf" and "nan".
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return str(approximate(value, max_denominator))

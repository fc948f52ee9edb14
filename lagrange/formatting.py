"""Pure functions that render polynomials as text.

Nothing here writes to a stream; callers decide where the strings go.
"""

from lagrange.rationals import rationalize, DEFAULT_MAX_DENOMINATOR

def format_number(value, rational=False, max_denominator=DEFAULT_MAX_DENOMINATOR):
    if rational:
        return rationalize(value, max_denominator)
    return "{:.12g}".format(value)

def format_coefficients(p, rational=False, max_denominator=DEFAULT_MAX_DENOMINATOR):
    """Render the coefficients of `p` as "[c0, c1, ...]", constant term first."""
    return "[" + ", ".join(format_number(c, rational, max_denominator) for c in p.coefficients) + "]"

def format_polynomial(p, rational=False, max_denominator=DEFAULT_MAX_DENOMINATOR):
    return "{} ≡ {}".format(p.name, format_coefficients(p, rational, max_denominator))

def format_evaluation(p, x, value):
    return "{}({}) = {}".format(p.name, format_number(x), format_number(value))

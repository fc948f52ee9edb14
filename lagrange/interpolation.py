"""Lagrange interpolation.

The interpolating polynomial is built directly from the Lagrange formula

    L(x) = sum_i y_i * prod_{k != i} (x - x_k) / (x_i - x_k)

using only Polynomial arithmetic: O(n^2) polynomial multiplications for n
points.
"""

from ordered_set import OrderedSet

from lagrange.logging import task, event
from lagrange.polynomials import Polynomial

INTERPOLATION_NAME = "ip"

class InvalidInput(ValueError):
    pass

def interpolate(xs, ys):
    """Return the polynomial of minimal degree passing through all (xs[i], ys[i]).

    If xs and ys differ in length, the extra coordinates at the end of the
    longer one are ignored.  Raises InvalidInput if fewer than two points are
    given or if any x-coordinate occurs more than once.
    """
    n = min(len(xs), len(ys))
    if n < 2:
        raise InvalidInput("At least two points are required for interpolation.")

    seen = OrderedSet()
    for x in xs:
        if x in seen:
            raise InvalidInput("Expected distinct x-coordinates, but {} occurs multiple times.".format(x))
        seen.add(x)

    with task("interpolate", points=n):
        result = Polynomial.ZERO
        for i in range(n):
            term = Polynomial([ys[i]])
            for k in range(n):
                if k == i:
                    continue
                term = term * Polynomial([-xs[k], 1]) / (xs[i] - xs[k])
            event("basis term {}: {}".format(i, term))
            result = result + term
        result.name = INTERPOLATION_NAME
    return result

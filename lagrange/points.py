"""Read interpolation points from text.

The input is a sequence of whitespace-separated numbers read pairwise as
x-coordinate and y-coordinate:

    0 1
    1 2
    2 5
    3

Reading stops at the end of the input or at the first token that is not a
number.  A final x-coordinate without a matching y-coordinate (the 3 above)
is kept as the point at which the caller may evaluate the result.
"""

from collections import namedtuple

Points = namedtuple("Points", ["xs", "ys", "query"])

def _numbers(tokens):
    for token in tokens:
        try:
            yield float(token)
        except ValueError:
            return

def read_points(f):
    """Parse the open text stream `f` into a Points(xs, ys, query) tuple.

    `query` is None unless the numbers run out in the middle of a pair.
    """
    xs = []
    ys = []
    query = None
    for i, value in enumerate(_numbers(f.read().split())):
        if i % 2 == 0:
            query = value
        else:
            xs.append(query)
            ys.append(value)
            query = None
    return Points(xs, ys, query)

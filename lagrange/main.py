#!/usr/bin/env python

"""
Main entry point for Lagrange interpolation. Run with --help for options.
"""

import sys
import argparse

from lagrange import common
from lagrange import opts
from lagrange import rationals
from lagrange.formatting import format_polynomial, format_evaluation
from lagrange.interpolation import interpolate, InvalidInput
from lagrange.logging import task, task_durations, log
from lagrange.points import read_points

def run(argv=None):
    """Entry point for the lagrange executable.

    This procedure reads the command line (sys.argv unless `argv` is given),
    interpolates the points in the input file and prints the result.
    """

    parser = argparse.ArgumentParser(description='Lagrange interpolating polynomial of a set of points.')
    parser.add_argument("-r", "--rational", action="store_true", help="Print coefficients as fractions instead of decimals")
    parser.add_argument("-x", "--at", metavar="X", type=float, action="append", default=[],
                        help="Evaluate the polynomial at X (may be given several times). " +
                             "A trailing unpaired number in the input is evaluated as well")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file of x y pairs (omit to use stdin)")
    args = parser.parse_args(argv)

    saved = opts.snapshot()
    opts.read(args)
    try:
        _solve(args)
    finally:
        opts.restore(saved)

def _solve(args):
    source = args.file or "-"
    try:
        with task("read points", file=source):
            with common.open_maybe_stdin(source) as f:
                points = read_points(f)
    except (OSError, UnicodeDecodeError) as e:
        print("Error: {} could not be read ({}).".format("standard input" if source == "-" else "file " + source, e), file=sys.stderr)
        sys.exit(1)

    queries = list(args.at)
    if points.query is not None:
        queries.append(points.query)

    with task("solve", points=min(len(points.xs), len(points.ys)), queries=len(queries)) as timing:
        try:
            p = interpolate(points.xs, points.ys)
        except InvalidInput as e:
            print("Error: {}".format(e), file=sys.stderr)
            sys.exit(1)
        values = [(x, p.evaluate(x)) for x in common.unique(queries)]

    print(format_polynomial(p, rational=args.rational, max_denominator=rationals.max_denominator.value))
    for x, y in values:
        print(format_evaluation(p, x, y))
    print("Done in {} µs.".format(int(timing.duration * 1000000)))
    for path, seconds in sorted(task_durations().items()):
        log("{} took {:.3}s".format(" / ".join(path), seconds))

if __name__ == "__main__":
    run()

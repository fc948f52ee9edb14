"""Settings declared next to the code that reads them.

A module that has a tunable setting (the log verbosity, the denominator bound
for rational output, ...) declares an Option at module level and reads
`option.value` where it needs it.  The command-line entry point calls
`setup` to expose every declared Option as a flag and `read` to store the
parsed values back into the Options.
"""

import argparse

from lagrange.common import FrozenDict

# All Option objects that have ever been created.
_OPTS = []

# Values that `restore` applied to options whose modules had not been
# imported yet.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    """A named setting of type bool, str or int.

    `check`, if given, is called with a parsed value and returns an error
    message for unacceptable values, or None.
    """
    def __init__(self, name, type, default, description="", metavar=None, check=None):
        assert type in (bool, str, int)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        self.check = check
        _OPTS.append(self)

    def parse(self, text):
        try:
            value = self.type(text)
        except ValueError:
            raise argparse.ArgumentTypeError("invalid {} value: {!r}".format(self.type.__name__, text))
        problem = self.check(value) if self.check is not None else None
        if problem:
            raise argparse.ArgumentTypeError(problem)
        return value

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def setup(parser):
    for o in _OPTS:
        flag = "--" + _argname(o)
        if o.type is bool:
            parser.add_argument(flag, action="store_true", default=False, help=o.description)
            continue
        default = "default={!r}".format(o.default)
        parser.add_argument(flag, metavar=o.metavar, type=o.parse, default=o.default,
            help="{} ({})".format(o.description, default) if o.description else default)

def read(args):
    for o in _OPTS:
        o.value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            o.value = not o.value

def snapshot():
    """Produce a hashable snapshot of current option values."""
    return FrozenDict([(o.name, o.value) for o in _OPTS])

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)
    _DEFAULT_VALUE_OVERRIDES = dict(snap)

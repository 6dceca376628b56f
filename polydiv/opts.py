"""Module-local settings.

Modules in polydiv declare their tunables (solver timeouts, verbosity, ...)
as Option instances right next to the code that reads them.  The command-line
front-end calls `setup` to register every Option declared so far with an
argparse parser and `read` to copy the parsed values back.
"""

# Every Option that has been created, in declaration order.
_OPTS = []

# Values that take precedence over declared defaults.  `restore` fills this
# so that modules imported after a restore still see the restored values.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS.append(self)

    def __bool__(self):
        raise Exception(
            "Option {!r} was used as a boolean; read `.value` instead.".format(self.name))

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def setup(parser):
    for o in _OPTS:
        n = _argname(o)
        if o.type is bool:
            parser.add_argument("--" + n, action="store_true", default=False, help=o.description)
        else:
            help = "default={!r}".format(o.default)
            if o.description:
                help = "{} ({})".format(o.description, help)
            parser.add_argument("--" + n, metavar=o.metavar, default=o.default, help=help)

def read(args):
    for o in _OPTS:
        value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            value = not value
        if o.type is int:
            value = int(value)
        o.value = value

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)
    _DEFAULT_VALUE_OVERRIDES = dict(snap)

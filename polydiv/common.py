"""Utility functions not found in the standard libraries.

Important functions:
 - @typechecked: decorator to perform runtime typechecking of annotated
   arguments and return values
 - product: multiply together the elements of an iterable
"""

from functools import wraps
import inspect

def check_type(value, ty, value_name="value"):
    """Assert that `value` matches the annotation `ty`.

    `ty` is None (anything goes), a class, or a tuple of annotations
    describing a tuple value entry by entry.  `value_name` appears in the
    assertion message.
    """

    if ty is None:
        pass
    elif type(ty) is tuple:
        assert isinstance(value, tuple), "{} has type {}, not {}".format(value_name, type(value).__name__, "tuple")
        assert len(value) == len(ty), "{} has {} entries, not {}".format(value_name, len(value), len(ty))
        for i, (v, t) in enumerate(zip(value, ty)):
            check_type(v, t, "{}[{}]".format(value_name, i))
    else:
        assert isinstance(value, ty), "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """
    Use the @typechecked decorator on a function to perform run-time typechecking.
    The docstring for `check_type` describes how type annotations should look.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

def product(iter, one=1):
    res = one
    for x in iter:
        res *= x
    return res

"""Locate the router a CLI command works on.

The target is named with the same import-string forms route handlers
use (``"pkg.module:attr"``), except that a string with no colon is a
module path and the attribute defaults to ``glue``.
"""

from glue.asgi import GlueASGI
from glue.glue import Glue
from glue.routing.handlers import import_object, split_import_string


def resolve_glue(target: str) -> Glue:
    """Return the ``Glue`` router named by *target*.

    The attribute may be a ``Glue``, a ``GlueASGI`` app wrapping one, or
    a zero-argument callable returning either.

    Raises:
        ModuleNotFoundError: the module cannot be imported.
        AttributeError: the module has no such attribute.
        TypeError: the attribute is not, and does not build, a router.
    """
    module_path, attr_name = split_import_string(target, default_attr="glue")
    obj = import_object(module_path, attr_name)

    if not isinstance(obj, (Glue, GlueASGI)) and callable(obj):
        obj = obj()

    if isinstance(obj, GlueASGI):
        obj = obj.glue
    if not isinstance(obj, Glue):
        msg = f"{target!r} is a {type(obj).__name__}, expected a Glue router"
        raise TypeError(msg)
    return obj

import importlib
from typing import Any

from nftsim import constants


def _load_class(classname: str) -> Any:
    """Load a class by its dotted path (module.Class)"""
    (module_name, class_name) = classname.rsplit(".", 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def join(*parts: str) -> str:
    """Join the parts of a concatenated set/map key"""
    return constants.CONCAT_SEPARATOR.join(parts)


def quote(value: str) -> str:
    return '"%s"' % value.replace('"', '\\"')


def object_repr(obj: object) -> str:
    """Return representation of object, skipping private and unset fields"""
    myvars = vars(obj)
    myrepr = ", ".join(
        "%s=%s" % (var, myvars[var])
        for var in myvars
        if not var.startswith("_") and myvars[var] is not None
    )
    return "<%s(%s)>" % (obj.__class__.__name__, myrepr)

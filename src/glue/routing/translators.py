"""Method translators — map an HTTP method to a handler operation name."""

from collections.abc import Callable

MethodTranslator = Callable[[str], str]


def identity(method: str) -> str:
    """Use the HTTP method itself as the operation name (``GET`` -> ``GET``)."""
    return method


def lowercase(method: str) -> str:
    """``GET`` -> ``get``, for handlers written with conventional method names."""
    return method.lower()


def prefixed(prefix: str) -> MethodTranslator:
    """Build a translator that prepends *prefix* to the lower-cased method.

    Usage::

        glue.set_method_translator(prefixed("on_"))  # GET -> on_get
    """

    def translate(method: str) -> str:
        return f"{prefix}{method.lower()}"

    return translate

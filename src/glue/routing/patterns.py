"""Pattern compilation.

Every route is a fully anchored regular expression::

    ^<escaped base url><fragment>/?$

The base url is escaped so it always matches literally; the fragment
is the route's own regex and is used verbatim.
"""

import re

from glue.errors import PatternCompilationError


def build_regex(fragment: str, base_url: str = "", *, trailing_slash: bool = True) -> str:
    """Return the anchored regex source for *fragment* under *base_url*."""
    suffix = "/?" if trailing_slash else ""
    return f"^{re.escape(base_url)}{fragment}{suffix}$"


def compile_pattern(
    fragment: str,
    base_url: str = "",
    *,
    ignore_case: bool = True,
    trailing_slash: bool = True,
) -> re.Pattern[str]:
    """Compile a route fragment into its matcher.

    Raises ``PatternCompilationError`` if the fragment is not a valid
    regular expression.

    Examples::

        compile_pattern("/items/(\\d+)").fullmatch("/items/5/")   # matches
        compile_pattern("/users", "/api").fullmatch("/API/users")  # matches
    """
    flags = re.IGNORECASE if ignore_case else 0
    try:
        return re.compile(build_regex(fragment, base_url, trailing_slash=trailing_slash), flags)
    except re.error as exc:
        raise PatternCompilationError(fragment, str(exc)) from exc

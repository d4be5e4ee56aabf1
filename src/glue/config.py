"""Router configuration.

GlueConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GlueConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = GlueConfig(base_url="/api", ignore_case=False)
    """

    # Literal prefix prepended (escaped) to every registered pattern
    base_url: str = ""

    # Compile patterns with re.IGNORECASE
    ignore_case: bool = True

    # Accept an optional trailing slash on every route
    trailing_slash: bool = True

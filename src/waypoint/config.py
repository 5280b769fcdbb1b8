"""Router configuration.

RouterConfig is a frozen dataclass, immutable after creation, so a compiled
router can never observe a config change.
"""

from dataclasses import dataclass

PRECEDENCE_REGISTRATION = "registration"
PRECEDENCE_SPECIFICITY = "specificity"


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(precedence="specificity")
    """

    # "registration": first registered route wins.
    # "specificity": literal segments beat captures, captures beat wildcards.
    precedence: str = PRECEDENCE_REGISTRATION

    # Path normalisation
    strip_trailing_slash: bool = True
    decode_segments: bool = True

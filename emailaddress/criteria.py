"""
Relaxations of the RFC2822 address grammar.

Criteria values are flags; any combination is a single hashable value, so two
sets built in a different order are the same cache key.

Presets:

 - STRICT: no relaxations; bare addr-spec with an RFC1035 host name.
 - RECOMMENDED: quoted identifiers ("Bob" <bob@example.com>), domain literals
   and parens in a quoted local part.
 - RFC_COMPLIANT: every relaxation.

RECOMMENDED is the default everywhere.
"""

from enum import Flag, auto
from typing import Iterable, Union


class Criteria(Flag):
    "Relaxations of the address grammar."

    # Allow "Name" <addr> and Name <addr>; otherwise only addr-spec.
    ALLOW_QUOTED_IDENTIFIERS = auto()
    # Allow [...] domain literals; the domain becomes an RFC2822 dot-atom
    # rather than an RFC1035 host name.
    ALLOW_DOMAIN_LITERALS = auto()
    # Allow "." in unquoted atoms of a display name.
    ALLOW_DOT_IN_A_TEXT = auto()
    # Allow "[" and "]" in unquoted atoms of a display name.
    ALLOW_SQUARE_BRACKETS_IN_A_TEXT = auto()
    # Allow "(" and ")" inside a quoted local part.
    ALLOW_PARENS_IN_LOCALPART = auto()


STRICT = Criteria(0)

RECOMMENDED = (
    Criteria.ALLOW_QUOTED_IDENTIFIERS
    | Criteria.ALLOW_DOMAIN_LITERALS
    | Criteria.ALLOW_PARENS_IN_LOCALPART
)

RFC_COMPLIANT = (
    Criteria.ALLOW_QUOTED_IDENTIFIERS
    | Criteria.ALLOW_DOMAIN_LITERALS
    | Criteria.ALLOW_DOT_IN_A_TEXT
    | Criteria.ALLOW_SQUARE_BRACKETS_IN_A_TEXT
    | Criteria.ALLOW_PARENS_IN_LOCALPART
)

PRESETS = {
    "STRICT": STRICT,
    "RECOMMENDED": RECOMMENDED,
    "RFC_COMPLIANT": RFC_COMPLIANT,
}


def as_criteria(value: Union[Criteria, Iterable[Criteria]]) -> Criteria:
    """
    Normalise a Criteria value or an iterable of Criteria members into one
    Criteria value.
    """
    if isinstance(value, Criteria):
        return value
    result = STRICT
    for flag in value:
        if not isinstance(flag, Criteria):
            raise ValueError(f"{flag!r} is not an address criteria flag")
        result |= flag
    return result


def parse_criteria(instr: str) -> Criteria:
    """
    Parse criteria from configuration text: either a preset name or a
    comma-separated list of flag names. Empty text means STRICT.

    Raises ValueError on an unknown name.
    """
    names = [name.strip().upper() for name in instr.split(",") if name.strip()]
    result = STRICT
    for name in names:
        if name in PRESETS:
            result |= PRESETS[name]
        elif name in Criteria.__members__:
            result |= Criteria[name]
        else:
            raise ValueError(f"Unknown address criteria '{name}'")
    return result


def criteria_names(criteria: Criteria) -> str:
    "The inverse of parse_criteria; flag names in definition order."
    return ", ".join(flag.name for flag in Criteria if flag in criteria)

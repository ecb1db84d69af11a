"""
Pulling the parts out of a single address.

A successful mailbox match is turned into AddressParts using the Grammar's
field tables; the personal name is cleaned up, and bounding quotes are taken
off the local part when that leaves a valid address.

Like emailaddress.validator, none of this raises on bad input; anything that
doesn't parse comes back as None.
"""

import logging
import re
from typing import NamedTuple, Optional, Sequence

from netaddr import AddrFormatError, IPAddress  # type: ignore

from emailaddress.address import EncodingError, InternetAddress
from emailaddress.criteria import RECOMMENDED
from emailaddress.grammar import FieldGroups, Grammar, GrammarCache, get_grammar
from emailaddress.type import CriteriaArgType

log = logging.getLogger(__name__)


class AddressParts(NamedTuple):
    personal: Optional[str]
    local_part: Optional[str]
    domain: Optional[str]

    @property
    def address(self) -> Optional[str]:
        "local_part@domain, or None if either is missing."
        if self.local_part is None or self.domain is None:
            return None
        return f"{self.local_part}@{self.domain}"

    @property
    def ip_address(self) -> Optional[IPAddress]:
        "The IP address in an address-literal domain, or None."
        return domain_literal_address(self.domain)


def parts_from_match(
    match: "re.Match[str]",
    grammar: Grammar,
    extract_cfws_personal_names: bool = False,
    fields: Optional[Sequence[FieldGroups]] = None,
) -> AddressParts:
    """
    Map a successful match from grammar.mailbox (or grammar.return_path, with
    fields=grammar.return_path_fields) onto AddressParts.

    When extract_cfws_personal_names is set and there's no display name, the
    first comment after the address is used as the personal name, so that
    "bob@example.com (Bob)" has the personal name "Bob".
    """
    if fields is None:
        fields = grammar.mailbox_fields
    local_part = None
    domain = None
    personal = None
    for row in fields:
        if match.group(row.form) is None:
            continue
        local_part = _first_group(match, row.local_part)
        domain = _first_group(match, row.domain)
        if row.personal:
            personal = match.group(row.personal)
        if personal is None and extract_cfws_personal_names and row.trailing_cfws:
            personal = remove_any_bounding(
                "(", ")", get_first_comment(match.group(row.trailing_cfws), grammar)
            )
        break

    if local_part is not None:
        local_part = local_part.strip()
    if domain is not None:
        domain = domain.strip()
    if personal is not None:
        personal = cleanup_personal_string(personal.strip(), grammar)

    # drop the quotes around the local part if it still parses without them
    unquoted = remove_any_bounding('"', '"', local_part)
    if local_part is not None and domain is not None:
        if grammar.addr_spec.fullmatch(f"{unquoted}@{domain}"):
            local_part = unquoted
    return AddressParts(personal, local_part, domain)


def _first_group(match: "re.Match[str]", names: Sequence[str]) -> Optional[str]:
    for name in names:
        value = match.group(name)
        if value is not None:
            return value
    return None


def extract_parts(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
) -> Optional[AddressParts]:
    """
    Split a single mailbox into personal name, local part and domain.

    Returns None if email isn't a valid mailbox. Otherwise local_part and
    domain are always set; personal may be None. local_part + "@" + domain is
    always a valid addr-spec.
    """
    if email is None:
        return None
    grammar = get_grammar(criteria, cache)
    match = grammar.mailbox.fullmatch(email)
    if match is None:
        return None
    parts = parts_from_match(match, grammar, extract_cfws_personal_names)
    if parts.local_part is None or parts.domain is None:
        return None
    return parts


def get_personal_name(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
) -> Optional[str]:
    parts = extract_parts(email, criteria, extract_cfws_personal_names, cache)
    return None if parts is None else parts.personal


def get_local_part(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
) -> Optional[str]:
    """
    The part of email to the left of the "@", unquoted where that's safe.
    Splitting on "@" isn't, given quoted local parts.
    """
    parts = extract_parts(email, criteria, extract_cfws_personal_names, cache)
    return None if parts is None else parts.local_part


def get_domain(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
) -> Optional[str]:
    parts = extract_parts(email, criteria, extract_cfws_personal_names, cache)
    return None if parts is None else parts.domain


def to_internet_address(
    parts: AddressParts, charset: str = "utf-8"
) -> Optional[InternetAddress]:
    "Build an InternetAddress from parts; None if they're incomplete or unencodable."
    address = parts.address
    if address is None:
        return None
    try:
        return InternetAddress(address, parts.personal, charset)
    except EncodingError as why:
        log.debug("Dropping %s: %s", address, why)
        return None


def get_internet_address(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
    charset: str = "utf-8",
) -> Optional[InternetAddress]:
    """
    Parse a single mailbox into an InternetAddress, with comments and
    unneeded quotes removed from the address.

    Returns None if email is invalid, or if its personal name can't be
    encoded in charset.
    """
    parts = extract_parts(email, criteria, extract_cfws_personal_names, cache)
    if parts is None:
        return None
    return to_internet_address(parts, charset)


def get_return_path_bracket_contents(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    cache: Optional[GrammarCache] = None,
) -> Optional[str]:
    """
    Whatever is between the angle brackets of a return path, unaltered; CFWS
    included. This is safer than slicing, since "<(my > path) >" is a valid
    return path; it gives "(my > path) ".

    Returns None if email isn't a valid return path.
    """
    if email is None:
        return None
    match = get_grammar(criteria, cache).return_path.fullmatch(email)
    if match is None:
        return None
    return match.group("path_contents")


def get_return_path_address(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
) -> Optional[str]:
    """
    The cleaned-up address in a return path, without CFWS or brackets and
    with unneeded quotes removed.

    Returns None if email isn't a valid return path, and "" if it's a valid
    empty one (as used for delivery status notifications: "<>" or
    "<(comment)>").
    """
    if email is None:
        return None
    grammar = get_grammar(criteria, cache)
    match = grammar.return_path.fullmatch(email)
    if match is None:
        return None
    parts = parts_from_match(
        match, grammar, extract_cfws_personal_names, grammar.return_path_fields
    )
    return parts.address or ""


def get_first_comment(text: Optional[str], grammar: Grammar) -> Optional[str]:
    "The first comment in text, trimmed; None if there isn't one."
    if text is None:
        return None
    match = grammar.comment.search(text)
    if match is None:
        return None
    return match.group().strip()


def cleanup_personal_string(text: Optional[str], grammar: Grammar) -> Optional[str]:
    """
    If text is a single quoted string (once trimmed), remove the quotes and
    unescape it. Anything else is returned trimmed but otherwise untouched.
    """
    if text is None:
        return None
    text = text.strip()
    if not grammar.quoted_string_wo_cfws.fullmatch(text):
        return text
    text = remove_any_bounding('"', '"', text)
    text = grammar.escaped_bslash.sub(r"\\", text)
    text = grammar.escaped_quote.sub('"', text)
    return text.strip()


def remove_any_bounding(start: str, end: str, instr: Optional[str]) -> Optional[str]:
    "If instr starts with start and ends with end, remove them."
    if instr is not None and len(instr) >= 2 and instr.startswith(start) and instr.endswith(end):
        return instr[1:-1]
    return instr


def domain_literal_address(domain: Optional[str]) -> Optional[IPAddress]:
    """
    The IP address in a "[192.0.2.1]" or "[IPv6:2001:db8::1]" domain literal.

    Returns None for host names and for literals that don't hold an address.
    """
    if domain is None or not (domain.startswith("[") and domain.endswith("]")):
        return None
    literal = domain[1:-1].strip()
    version = 4
    if literal[:5].lower() == "ipv6:":
        literal = literal[5:]
        version = 6
    try:
        return IPAddress(literal, version)
    except (AddrFormatError, ValueError):
        return None

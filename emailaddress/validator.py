"""
Yes/no checks of address syntax.

None of these raise on bad input; text that doesn't match is simply invalid.
"""

from typing import Optional

from emailaddress.criteria import RECOMMENDED
from emailaddress.grammar import GrammarCache, get_grammar
from emailaddress.type import CriteriaArgType


def is_valid(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    cache: Optional[GrammarCache] = None,
) -> bool:
    """
    Is email a single valid RFC2822 mailbox? That's a bare addr-spec, or also
    a name-addr ("Bob" <bob@example.com>) when the criteria allow quoted
    identifiers.
    """
    if email is None:
        return False
    return get_grammar(criteria, cache).mailbox.fullmatch(email) is not None


def is_valid_addr_spec(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    cache: Optional[GrammarCache] = None,
) -> bool:
    "Is email a valid addr-spec (local-part@domain, no display name or brackets)?"
    if email is None:
        return False
    return get_grammar(criteria, cache).addr_spec.fullmatch(email) is not None


def is_valid_mailbox_list(
    header_txt: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    cache: Optional[GrammarCache] = None,
) -> bool:
    """
    Is header_txt a valid mailbox-list? Applicable to From and Resent-From
    only; other address headers are address-lists.
    """
    if header_txt is None:
        return False
    return get_grammar(criteria, cache).mailbox_list.fullmatch(header_txt) is not None


def is_valid_address_list(
    header_txt: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    cache: Optional[GrammarCache] = None,
) -> bool:
    """
    Is header_txt a valid address-list, groups included? Applicable to To, Cc,
    Bcc, Reply-To, Resent-To, Resent-Cc and Resent-Bcc.

    Each address has to end at the end of the text or at a comma, which is
    skipped before the next address is matched.
    """
    if header_txt is None:
        return False
    address = get_grammar(criteria, cache).address
    end = len(header_txt)
    pos = 0
    while True:
        match = address.match(header_txt, pos)
        if match is None:
            return False
        if match.end() == end:
            return True
        if header_txt[match.end()] != ",":
            return False
        pos = match.end() + 1


def is_valid_return_path(
    email: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    cache: Optional[GrammarCache] = None,
) -> bool:
    """
    Is email a valid Return-Path value? Note that <> and <(comment)> are valid
    (empty) return paths, but <""> is not.
    """
    if email is None:
        return False
    return get_grammar(criteria, cache).return_path.fullmatch(email) is not None

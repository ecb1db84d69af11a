"""
Flattening address-list header values.

The address-list production (with groups) is too big to match as a single
pattern, so HeaderScanner walks the header instead: it matches one mailbox at a
time, skips group prefixes ("Friends:") and group ends (";"), and collects
every mailbox it finds. Group names and structure aren't kept.

Scanning stops at the first thing that can't be an address; whatever was
found before that is returned. Use emailaddress.validator if the whole header
needs to be valid.
"""

import logging
import re
from typing import List, Optional

from emailaddress.address import EncodingError, InternetAddress
from emailaddress.criteria import RECOMMENDED
from emailaddress.grammar import Grammar, GrammarCache, get_grammar
from emailaddress.parser import AddressParts, parts_from_match
from emailaddress.type import AddressFactory, CriteriaArgType

log = logging.getLogger(__name__)


class HeaderScanner:
    """
    One pass over a header value. Use once, then throw away.

    The scan is in one of three states: scanning the top-level list, inside a
    group (after "name:"), or just after a group's closing ";", where only a
    comma can lead to the next item.
    """

    def __init__(
        self, text: str, grammar: Grammar, extract_cfws_personal_names: bool = False
    ) -> None:
        self.text = text
        self.grammar = grammar
        self.extract_cfws_personal_names = extract_cfws_personal_names
        self.pos = 0
        self.in_group = False
        self.after_group_end = False
        self.group_end_pos = -1
        self.results: List[AddressParts] = []

    def scan(self) -> List[AddressParts]:
        text = self.text
        end = len(text)
        if not end:
            return self.results
        while self._step(text, end):
            pass
        return self.results

    def _step(self, text: str, end: int) -> bool:
        "Advance past one item. Returns False when the scan is over."
        if self.after_group_end:
            comma = text.find(",", self.group_end_pos)
            if comma < 0 or comma >= end - 1:
                return self._stop("nothing after group end")
            self.pos = comma + 1
            self.after_group_end = False

        if text[self.pos] == ";":
            self.in_group = False
            self.pos += 1
            if self.pos >= end:
                return False
            self.after_group_end = True
            self.group_end_pos = self.pos

        match = self.grammar.mailbox.match(text, self.pos)
        if match is not None:
            self.in_group = False
            match_end = match.end()
            if match_end < end:
                following = text[match_end]
                if following not in ",;":
                    return self._stop(f"unexpected {following!r}")
                if following == ";":
                    self.after_group_end = True
            self._collect(match)
            if match_end >= end - 1:
                return False
            if self.after_group_end:
                self.group_end_pos = match_end + 1
            else:
                self.pos = match_end + 1
            return True

        prefix = self.grammar.group_prefix.match(text, self.pos)
        if prefix is not None:
            if prefix.end() >= end:
                return self._stop("empty group at end")
            self.pos = prefix.end()
            self.in_group = True
            return True

        if self.in_group:
            # skip to the end of the group
            semicolon = text.find(";", self.pos)
            if semicolon < 0 or semicolon >= end - 1:
                return self._stop("unterminated group")
            self.pos = semicolon + 1
            self.in_group = False
            self.after_group_end = True
            self.group_end_pos = self.pos
            return True

        if not self.after_group_end:
            return self._stop("no address")
        return True

    def _collect(self, match: "re.Match[str]") -> None:
        parts = parts_from_match(match, self.grammar, self.extract_cfws_personal_names)
        if parts.local_part is not None and parts.domain is not None:
            self.results.append(parts)

    def _stop(self, reason: str) -> bool:
        log.debug("Stopped scanning header at %s: %s", self.pos, reason)
        return False


def extract_all_from_header(
    header_txt: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
) -> List[AddressParts]:
    """
    Every mailbox in a header value (without the header name), groups
    flattened, in order. Never fails; may be empty.
    """
    if not header_txt:
        return []
    grammar = get_grammar(criteria, cache)
    return HeaderScanner(header_txt, grammar, extract_cfws_personal_names).scan()


def extract_header_addresses(
    header_txt: Optional[str],
    criteria: CriteriaArgType = RECOMMENDED,
    extract_cfws_personal_names: bool = False,
    cache: Optional[GrammarCache] = None,
    charset: str = "utf-8",
    factory: AddressFactory = InternetAddress,
) -> list:
    """
    As extract_all_from_header, but building an address with factory for
    each one. Addresses whose personal name can't be encoded in charset are
    left out.
    """
    addresses = []
    for parts in extract_all_from_header(
        header_txt, criteria, extract_cfws_personal_names, cache
    ):
        try:
            addresses.append(factory(parts.address, parts.personal, charset))
        except EncodingError as why:
            log.debug("Dropping %s: %s", parts.address, why)
    return addresses

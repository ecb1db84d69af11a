"""
The address grammar for one set of criteria.

Grammar composes the tokens in emailaddress.syntax into the RFC2822 address
productions, shaped by the relaxation criteria, and compiles the few that
validation and extraction need.

Because the criteria change the shape of the grammar, the groups that carry
the personal name, local part and domain are named groups, and each form of
mailbox is described by a FieldGroups row in Grammar.mailbox_fields (and
Grammar.return_path_fields). Extraction only reads those tables.

Patterns that repeat the mailbox (mailbox-list, address) are compiled from
copies with the named groups turned into non-capturing ones.

The whole address-list production is too big to be useful as a single pattern;
see emailaddress.validator.is_valid_address_list and emailaddress.header for
how lists are walked instead.
"""

import logging
import re
from typing import Dict, List, NamedTuple, Optional, Tuple

from emailaddress.criteria import Criteria, RECOMMENDED, as_criteria, criteria_names
from emailaddress.syntax import rfc1035
from emailaddress.syntax.rfc2822 import (
    ATEXT_CHARS,
    CFWS,
    DQUOTE,
    ESCAPED_BSLASH,
    ESCAPED_QUOTE,
    FWS,
    comment,
    domain_literal_wo_cfws,
    dot_atom_text,
    local_part_qtext,
    qtext,
    quoted_pair,
    quoted_string_wo_cfws,
    word_separator,
)
from emailaddress.type import CriteriaArgType

log = logging.getLogger(__name__)

RE_FLAGS = re.VERBOSE


class FieldGroups(NamedTuple):
    """
    Where the semantic fields of one form of mailbox are captured.

    form is the group that is set when that form matched; local_part and
    domain list the alternatives in the order they're tried.
    """

    form: str
    personal: Optional[str]
    local_part: Tuple[str, ...]
    domain: Tuple[str, ...]
    trailing_cfws: Optional[str]


def uncaptured(pattern: str) -> str:
    "Turn every named group in pattern into a non-capturing group."
    return re.sub(r"\(\?P<\w+>", "(?:", pattern)


class Grammar:
    """
    Compiled RFC2822 address patterns for one set of criteria.

    Build these through a GrammarCache; they're immutable once built.
    """

    def __init__(self, criteria: Criteria) -> None:
        self.criteria = criteria
        allow_domain_literals = Criteria.ALLOW_DOMAIN_LITERALS in criteria

        # atext         = RFC2822 atext, plus "." and "[]" when allowed
        atext_extra = ""
        if Criteria.ALLOW_DOT_IN_A_TEXT in criteria:
            atext_extra += "."
        if Criteria.ALLOW_SQUARE_BRACKETS_IN_A_TEXT in criteria:
            atext_extra += r"\[\]"
        atext = rf"[{ATEXT_CHARS}{atext_extra}]"

        # quoted local-part; the qcontent alternatives are atomic
        lp_qtext = (
            qtext if Criteria.ALLOW_PARENS_IN_LOCALPART in criteria else local_part_qtext
        )
        self._local_quoted = (
            rf"(?: {DQUOTE} (?: {FWS}? (?> {lp_qtext} | {quoted_pair} ) )* {FWS}? {DQUOTE} )"
        )

        # domain        = RFC1035 host name, or with domain literals,
        #                 dot-atom / domain-literal
        self._allow_domain_literals = allow_domain_literals

        # word          = atom / quoted-string
        # phrase        = 1*word
        #
        # The CFWS around each word is hoisted out: leading CFWS once, a
        # separator that must hold FWS between words, trailing CFWS once.
        word = rf"(?: (?> {atext}+ ) | {quoted_string_wo_cfws} )"
        phrase = rf"(?: {CFWS}? {word} (?: {word_separator} {word} )* {CFWS}? )"

        # addr-spec     = local-part "@" domain
        plain_addr_spec, _ = self._addr_spec("addr", trailing=False)
        self._addr_spec_source = uncaptured(plain_addr_spec)

        # mailbox       = name-addr / addr-spec
        # name-addr     = [display-name] angle-addr
        # angle-addr    = [CFWS] "<" addr-spec ">" [CFWS]
        #
        # The bare addr-spec form captures the CFWS after the domain, which
        # may hold the personal name as a comment.
        mailbox_fields: List[FieldGroups] = []
        alternatives = []
        if Criteria.ALLOW_QUOTED_IDENTIFIERS in criteria:
            angle_spec, angle_fields = self._addr_spec("angle", trailing=False)
            name_addr = (
                rf"(?P<name_addr> (?P<personal>{phrase})??"
                rf" {CFWS}? < {angle_spec} > (?P<angle_trailing>{CFWS})? )"
            )
            alternatives.append(name_addr)
            mailbox_fields.append(
                angle_fields._replace(
                    form="name_addr", personal="personal", trailing_cfws="angle_trailing"
                )
            )
        spec, spec_fields = self._addr_spec("spec", trailing=True)
        alternatives.append(rf"(?P<addr_spec> {spec} )")
        mailbox_fields.append(spec_fields._replace(form="addr_spec"))
        mailbox = rf"(?: {' | '.join(alternatives)} )"
        bare_mailbox = uncaptured(mailbox)

        # return-path   = [CFWS] "<" ([CFWS] / addr-spec) ">" [CFWS]
        #
        # An empty path (CFWS only) is a valid DSN return path.
        path_spec, path_fields = self._addr_spec("path", trailing=False)
        return_path = (
            rf"(?: {CFWS}? < (?P<path_contents> {CFWS}? | (?P<path> {path_spec} ) ) > {CFWS}? )"
        )

        # mailbox-list  = mailbox *("," mailbox)
        mailbox_list = rf"(?: {bare_mailbox} (?: , {bare_mailbox} )* )"

        # group         = display-name ":" [mailbox-list / CFWS] ";" [CFWS]
        # address       = mailbox / group
        group_prefix = rf"(?: {phrase} : )"
        group = rf"(?: {group_prefix} (?: {CFWS} | {mailbox_list} )? ; {CFWS}? )"
        address = rf"(?: {bare_mailbox} | {group} )"

        self.mailbox_fields: Tuple[FieldGroups, ...] = tuple(mailbox_fields)
        self.return_path_fields: Tuple[FieldGroups, ...] = (
            path_fields._replace(form="path"),
        )

        self.mailbox = re.compile(mailbox, RE_FLAGS)
        self.addr_spec = re.compile(self._addr_spec_source, RE_FLAGS)
        self.mailbox_list = re.compile(mailbox_list, RE_FLAGS)
        self.address = re.compile(address, RE_FLAGS)
        self.comment = re.compile(comment, RE_FLAGS)
        self.quoted_string_wo_cfws = re.compile(quoted_string_wo_cfws, RE_FLAGS)
        self.return_path = re.compile(return_path, RE_FLAGS)
        self.group_prefix = re.compile(group_prefix, RE_FLAGS)
        self.escaped_quote = re.compile(ESCAPED_QUOTE)
        self.escaped_bslash = re.compile(ESCAPED_BSLASH)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} [{criteria_names(self.criteria)}] at {id(self):#x}>"

    def _addr_spec(self, prefix: str, trailing: bool) -> Tuple[str, FieldGroups]:
        """
        Compose an addr-spec whose fields are captured in groups named after
        prefix. When trailing is set, the CFWS after the domain is captured too.

        Returns the pattern and its FieldGroups; the form (and personal name)
        are left for the caller to fill in.
        """
        # local-part    = dot-atom / quoted-string
        local_part = (
            rf"(?: {CFWS}? (?P<{prefix}_local>{dot_atom_text}) {CFWS}?"
            rf" | {CFWS}? (?P<{prefix}_local_quoted>{self._local_quoted}) {CFWS}? )"
        )
        local_groups = (f"{prefix}_local", f"{prefix}_local_quoted")

        if self._allow_domain_literals:
            # domain    = dot-atom / domain-literal
            domain = (
                rf"(?: {CFWS}? (?P<{prefix}_domain>{dot_atom_text})"
                rf" | {CFWS}? (?P<{prefix}_domain_literal>{domain_literal_wo_cfws}) )"
            )
            domain_groups: Tuple[str, ...] = (
                f"{prefix}_domain",
                f"{prefix}_domain_literal",
            )
        else:
            domain = rf"(?: {CFWS}? (?P<{prefix}_domain>{rfc1035.domain_name}) )"
            domain_groups = (f"{prefix}_domain",)

        if trailing:
            trailing_group: Optional[str] = f"{prefix}_trailing"
            domain_cfws = rf"(?P<{trailing_group}>{CFWS})?"
        else:
            trailing_group = None
            domain_cfws = rf"{CFWS}?"

        pattern = rf"(?: {local_part} @ {domain} {domain_cfws} )"
        return pattern, FieldGroups(
            form=prefix,
            personal=None,
            local_part=local_groups,
            domain=domain_groups,
            trailing_cfws=trailing_group,
        )


class GrammarCache:
    """
    Grammars by criteria, built on first use and kept for the life of the
    cache.

    Concurrent callers may both build a grammar for a new criteria value; only
    one is kept, and every caller gets a complete one.
    """

    def __init__(self) -> None:
        self._grammars: Dict[Criteria, Grammar] = {}

    def get(self, criteria: CriteriaArgType = RECOMMENDED) -> Grammar:
        criteria = as_criteria(criteria)
        grammar = self._grammars.get(criteria)
        if grammar is None:
            log.debug("Compiling address grammar for [%s]", criteria_names(criteria))
            grammar = self._grammars.setdefault(criteria, Grammar(criteria))
        return grammar

    def __contains__(self, criteria: CriteriaArgType) -> bool:
        return as_criteria(criteria) in self._grammars

    def __len__(self) -> int:
        return len(self._grammars)


DEFAULT_CACHE = GrammarCache()


def get_grammar(
    criteria: CriteriaArgType = RECOMMENDED, cache: Optional[GrammarCache] = None
) -> Grammar:
    "Get the Grammar for criteria from cache, or from the process-wide default."
    if cache is None:
        cache = DEFAULT_CACHE
    return cache.get(criteria)

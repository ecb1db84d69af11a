"""
Address operations with configured defaults.

An AddressContext holds criteria, extract_cfws_personal_names and charset
from configuration, and its own GrammarCache, so that callers (and tests)
don't share the process-wide one.
"""

from configparser import SectionProxy
from typing import List, Optional

from emailaddress import header, parser, validator
from emailaddress.address import InternetAddress
from emailaddress.config import load_config
from emailaddress.criteria import Criteria, parse_criteria
from emailaddress.grammar import Grammar, GrammarCache
from emailaddress.parser import AddressParts


class AddressContext:
    """
    Validation and extraction with settings taken from config (see
    emailaddress.config).

    Raises ValueError at construction if config names unknown criteria.
    """

    def __init__(
        self,
        config: Optional[SectionProxy] = None,
        cache: Optional[GrammarCache] = None,
    ) -> None:
        if config is None:
            config = load_config()
        self.config = config
        self.criteria: Criteria = parse_criteria(config.get("criteria", fallback=""))
        self.extract_cfws_personal_names = config.getboolean(
            "extract_cfws_personal_names", fallback=False
        )
        self.charset = config.get("charset", fallback="utf-8")
        if cache is None:
            cache = GrammarCache()
        self.cache = cache

    @property
    def grammar(self) -> Grammar:
        return self.cache.get(self.criteria)

    def is_valid(self, email: Optional[str]) -> bool:
        return validator.is_valid(email, self.criteria, self.cache)

    def is_valid_addr_spec(self, email: Optional[str]) -> bool:
        return validator.is_valid_addr_spec(email, self.criteria, self.cache)

    def is_valid_mailbox_list(self, header_txt: Optional[str]) -> bool:
        return validator.is_valid_mailbox_list(header_txt, self.criteria, self.cache)

    def is_valid_address_list(self, header_txt: Optional[str]) -> bool:
        return validator.is_valid_address_list(header_txt, self.criteria, self.cache)

    def is_valid_return_path(self, email: Optional[str]) -> bool:
        return validator.is_valid_return_path(email, self.criteria, self.cache)

    def extract_parts(self, email: Optional[str]) -> Optional[AddressParts]:
        return parser.extract_parts(
            email, self.criteria, self.extract_cfws_personal_names, self.cache
        )

    def get_personal_name(self, email: Optional[str]) -> Optional[str]:
        return parser.get_personal_name(
            email, self.criteria, self.extract_cfws_personal_names, self.cache
        )

    def get_local_part(self, email: Optional[str]) -> Optional[str]:
        return parser.get_local_part(
            email, self.criteria, self.extract_cfws_personal_names, self.cache
        )

    def get_domain(self, email: Optional[str]) -> Optional[str]:
        return parser.get_domain(
            email, self.criteria, self.extract_cfws_personal_names, self.cache
        )

    def get_internet_address(self, email: Optional[str]) -> Optional[InternetAddress]:
        return parser.get_internet_address(
            email,
            self.criteria,
            self.extract_cfws_personal_names,
            self.cache,
            self.charset,
        )

    def get_return_path_address(self, email: Optional[str]) -> Optional[str]:
        return parser.get_return_path_address(
            email, self.criteria, self.extract_cfws_personal_names, self.cache
        )

    def get_return_path_bracket_contents(self, email: Optional[str]) -> Optional[str]:
        return parser.get_return_path_bracket_contents(email, self.criteria, self.cache)

    def extract_all_from_header(self, header_txt: Optional[str]) -> List[AddressParts]:
        return header.extract_all_from_header(
            header_txt, self.criteria, self.extract_cfws_personal_names, self.cache
        )

    def extract_header_addresses(self, header_txt: Optional[str]) -> List[InternetAddress]:
        return header.extract_header_addresses(
            header_txt,
            self.criteria,
            self.extract_cfws_personal_names,
            self.cache,
            self.charset,
        )

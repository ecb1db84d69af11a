#!/usr/bin/env python

import re
import sys

from emailaddress.criteria import Criteria, STRICT

__all__ = [
    "rfc1035",
    "rfc2822",
]

# character class bodies and other strings that aren't patterns on their own
NOT_PATTERNS = {"SPEC_URL", "NO_WS_CTL", "ATEXT_CHARS"}


def all_criteria() -> list:
    "Every combination of the criteria flags."
    flags = list(Criteria)
    combinations = []
    for bits in range(2 ** len(flags)):
        criteria = STRICT
        for offset, flag in enumerate(flags):
            if bits & (1 << offset):
                criteria |= flag
        combinations.append(criteria)
    return combinations


def check_regex() -> int:
    """
    Compile all the regex in this package, and the grammar for every
    combination of criteria. Returns the number of problems found.
    """
    from emailaddress.grammar import Grammar  # pylint: disable=import-outside-toplevel

    problems = 0
    for module_name in __all__:
        full_name = f"emailaddress.syntax.{module_name}"
        __import__(full_name)
        module = sys.modules[full_name]
        for attr_name in dir(module):
            attr_value = getattr(module, attr_name, None)
            if attr_name.startswith("_") or attr_name in NOT_PATTERNS:
                continue
            if isinstance(attr_value, str):
                try:
                    re.compile(attr_value, re.VERBOSE)
                except re.error as why:
                    print("*", module_name, attr_name, why)
                    problems += 1
    for criteria in all_criteria():
        try:
            Grammar(criteria)
        except re.error as why:
            print("*", criteria, why)
            problems += 1
    return problems


if __name__ == "__main__":
    sys.exit(1 if check_regex() else 0)

#!/usr/bin/env python3

import logging
import unittest

from emailaddress.criteria import Criteria, RECOMMENDED, RFC_COMPLIANT, STRICT
from emailaddress.grammar import (
    DEFAULT_CACHE,
    FieldGroups,
    Grammar,
    GrammarCache,
    get_grammar,
    uncaptured,
)
from emailaddress.syntax import all_criteria, check_regex


class TestSyntax(unittest.TestCase):
    def test_check_regex(self):
        self.assertEqual(check_regex(), 0)

    def test_all_criteria(self):
        combinations = all_criteria()
        self.assertEqual(len(combinations), 32)
        self.assertEqual(len(set(combinations)), 32)
        self.assertIn(STRICT, combinations)
        self.assertIn(RFC_COMPLIANT, combinations)

    def test_uncaptured(self):
        self.assertEqual(uncaptured(r"(?P<a>x(?P<b_c>y))"), r"(?:x(?:y))")
        self.assertEqual(uncaptured(r"(?:x)(?>y)"), r"(?:x)(?>y)")


class TestGrammarCache(unittest.TestCase):
    def test_get_or_create(self):
        cache = GrammarCache()
        self.assertEqual(len(cache), 0)
        self.assertNotIn(RECOMMENDED, cache)
        grammar = cache.get(RECOMMENDED)
        self.assertIsInstance(grammar, Grammar)
        self.assertIn(RECOMMENDED, cache)
        self.assertIs(cache.get(RECOMMENDED), grammar)
        self.assertEqual(len(cache), 1)

    def test_equal_criteria_share_a_grammar(self):
        cache = GrammarCache()
        a = cache.get(
            [Criteria.ALLOW_DOMAIN_LITERALS, Criteria.ALLOW_QUOTED_IDENTIFIERS]
        )
        b = cache.get(
            Criteria.ALLOW_QUOTED_IDENTIFIERS | Criteria.ALLOW_DOMAIN_LITERALS
        )
        self.assertIs(a, b)
        self.assertEqual(len(cache), 1)

    def test_caches_are_isolated(self):
        one = GrammarCache()
        two = GrammarCache()
        self.assertIsNot(one.get(STRICT), two.get(STRICT))
        self.assertIsNot(get_grammar(STRICT, one), get_grammar(STRICT))
        self.assertIs(get_grammar(STRICT), DEFAULT_CACHE.get(STRICT))

    def test_compile_is_logged(self):
        cache = GrammarCache()
        with self.assertLogs("emailaddress.grammar", level=logging.DEBUG) as cm:
            cache.get(STRICT)
        self.assertEqual(len(cm.output), 1)
        self.assertIn("Compiling", cm.output[0])


class TestFieldGroups(unittest.TestCase):
    def test_rfc_compliant(self):
        grammar = GrammarCache().get(RFC_COMPLIANT)
        self.assertEqual(
            grammar.mailbox_fields,
            (
                FieldGroups(
                    form="name_addr",
                    personal="personal",
                    local_part=("angle_local", "angle_local_quoted"),
                    domain=("angle_domain", "angle_domain_literal"),
                    trailing_cfws="angle_trailing",
                ),
                FieldGroups(
                    form="addr_spec",
                    personal=None,
                    local_part=("spec_local", "spec_local_quoted"),
                    domain=("spec_domain", "spec_domain_literal"),
                    trailing_cfws="spec_trailing",
                ),
            ),
        )
        self.assertEqual(
            grammar.return_path_fields,
            (
                FieldGroups(
                    form="path",
                    personal=None,
                    local_part=("path_local", "path_local_quoted"),
                    domain=("path_domain", "path_domain_literal"),
                    trailing_cfws=None,
                ),
            ),
        )

    def test_strict(self):
        grammar = GrammarCache().get(STRICT)
        self.assertEqual(
            grammar.mailbox_fields,
            (
                FieldGroups(
                    form="addr_spec",
                    personal=None,
                    local_part=("spec_local", "spec_local_quoted"),
                    domain=("spec_domain",),
                    trailing_cfws="spec_trailing",
                ),
            ),
        )

    def test_every_table_names_real_groups(self):
        cache = GrammarCache()
        for criteria in all_criteria():
            grammar = cache.get(criteria)
            for (pattern, fields) in [
                (grammar.mailbox, grammar.mailbox_fields),
                (grammar.return_path, grammar.return_path_fields),
            ]:
                for row in fields:
                    names = [row.form, *row.local_part, *row.domain]
                    if row.personal:
                        names.append(row.personal)
                    if row.trailing_cfws:
                        names.append(row.trailing_cfws)
                    for name in names:
                        self.assertIn(name, pattern.groupindex, f"{grammar} {name}")

    def test_compound_patterns_capture_nothing(self):
        grammar = GrammarCache().get(RFC_COMPLIANT)
        for pattern in [grammar.addr_spec, grammar.mailbox_list, grammar.address]:
            self.assertEqual(pattern.groups, 0)


class TestBacktracking(unittest.TestCase):
    """
    Inputs that make a naive RFC2822 grammar backtrack exponentially. These
    only finish if matching stays close to linear.
    """

    size = 3000

    def setUp(self):
        self.cache = GrammarCache()

    def test_pathological_inputs(self):
        n = self.size
        for text in [
            "a." * n,
            "a." * n + "@",
            "a" * n + "@" + "b." * n,
            "a@" + "b." * n + ".",
            "a@" + "b-" * n + ".",
            "a " * n,
            "a " * n + "<",
            "(a)" * n + "@",
            " (" * n,
            "(" + "a " * n,
            '"' + "a " * n,
            '"' + "\\a" * n,
            "a@[" + "1" * n,
            "a@[" + "1 " * n,
            "Kayaks.org " * n,
            "a:" + "b@c.com," * n,
            "<" + " " * n,
        ]:
            for criteria in [STRICT, RECOMMENDED, RFC_COMPLIANT]:
                grammar = self.cache.get(criteria)
                self.assertIsNone(grammar.mailbox.fullmatch(text), text[:20])
                self.assertIsNone(grammar.addr_spec.fullmatch(text), text[:20])
                self.assertIsNone(grammar.return_path.fullmatch(text), text[:20])
                grammar.address.match(text)
                grammar.mailbox_list.fullmatch(text)

    def test_long_valid_inputs(self):
        n = self.size
        grammar = self.cache.get(RFC_COMPLIANT)
        local = ".".join(["a"] * n)
        self.assertIsNotNone(grammar.mailbox.fullmatch(local + "@example.com"))
        phrase = " ".join(["Bob"] * n)
        self.assertIsNotNone(grammar.mailbox.fullmatch(phrase + " <bob@example.com>"))
        self.assertIsNotNone(grammar.comment.fullmatch("(" + "a " * n + ")"))


if __name__ == "__main__":
    unittest.main()

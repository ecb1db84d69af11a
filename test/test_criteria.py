#!/usr/bin/env python3

import unittest

from emailaddress.criteria import (
    Criteria,
    RECOMMENDED,
    RFC_COMPLIANT,
    STRICT,
    as_criteria,
    criteria_names,
    parse_criteria,
)


class TestCriteria(unittest.TestCase):
    def test_presets(self):
        self.assertEqual(STRICT, Criteria(0))
        self.assertIn(Criteria.ALLOW_QUOTED_IDENTIFIERS, RECOMMENDED)
        self.assertIn(Criteria.ALLOW_DOMAIN_LITERALS, RECOMMENDED)
        self.assertIn(Criteria.ALLOW_PARENS_IN_LOCALPART, RECOMMENDED)
        self.assertNotIn(Criteria.ALLOW_DOT_IN_A_TEXT, RECOMMENDED)
        self.assertNotIn(Criteria.ALLOW_SQUARE_BRACKETS_IN_A_TEXT, RECOMMENDED)
        for flag in Criteria:
            self.assertIn(flag, RFC_COMPLIANT)

    def test_as_criteria(self):
        self.assertEqual(as_criteria(RECOMMENDED), RECOMMENDED)
        self.assertEqual(as_criteria([]), STRICT)
        a = as_criteria(
            [Criteria.ALLOW_DOMAIN_LITERALS, Criteria.ALLOW_QUOTED_IDENTIFIERS]
        )
        b = as_criteria(
            {Criteria.ALLOW_QUOTED_IDENTIFIERS, Criteria.ALLOW_DOMAIN_LITERALS}
        )
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertRaises(ValueError, as_criteria, ["ALLOW_DOMAIN_LITERALS"])

    def test_parse_criteria(self):
        i = 0
        for (instr, expected) in [
            ("", STRICT),
            ("STRICT", STRICT),
            ("recommended", RECOMMENDED),
            ("RFC_COMPLIANT", RFC_COMPLIANT),
            ("ALLOW_QUOTED_IDENTIFIERS", Criteria.ALLOW_QUOTED_IDENTIFIERS),
            (
                " allow_dot_in_a_text , ALLOW_QUOTED_IDENTIFIERS ",
                Criteria.ALLOW_DOT_IN_A_TEXT | Criteria.ALLOW_QUOTED_IDENTIFIERS,
            ),
            (
                "RECOMMENDED, ALLOW_DOT_IN_A_TEXT",
                RECOMMENDED | Criteria.ALLOW_DOT_IN_A_TEXT,
            ),
        ]:
            self.assertEqual(
                expected, parse_criteria(instr), "[%s] %r" % (i, instr)
            )
            i += 1

    def test_parse_criteria_unknown(self):
        with self.assertRaises(ValueError) as cm:
            parse_criteria("RECOMMENDED, ALLOW_EVERYTHING")
        self.assertIn("ALLOW_EVERYTHING", str(cm.exception))

    def test_criteria_names(self):
        self.assertEqual(criteria_names(STRICT), "")
        self.assertEqual(
            criteria_names(RECOMMENDED),
            "ALLOW_QUOTED_IDENTIFIERS, ALLOW_DOMAIN_LITERALS, ALLOW_PARENS_IN_LOCALPART",
        )
        self.assertEqual(parse_criteria(criteria_names(RFC_COMPLIANT)), RFC_COMPLIANT)


if __name__ == "__main__":
    unittest.main()

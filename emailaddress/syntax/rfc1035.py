"""
Regex for RFC1035 domain names

These regex are derived from the preferred name syntax in RFC1035, Section 2.3.1:

  <https://tools.ietf.org/html/rfc1035#section-2.3.1>

with the RFC1123 relaxation that a label may start with a digit, and the
requirement that the top-level label be 2 to 26 letters.

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

SPEC_URL = "https://tools.ietf.org/html/rfc1035"

# <letter> ::= any one of the 52 alphabetic characters A through Z in
# upper case and a through z in lower case

letter = r"[a-zA-Z]"

# <let-dig> ::= <letter> | <digit>

let_dig = r"[a-zA-Z0-9]"

# <let-dig-hyp> ::= <let-dig> | "-"

let_dig_hyp = r"[a-zA-Z0-9\-]"

# <label> ::= <letter> [ [ <ldh-str> ] <let-dig> ]
#
# Labels are 63 characters or less.

label = rf"(?> {let_dig} (?: {let_dig_hyp}{{0,61}} {let_dig} )? )"

# <subdomain> ::= <label> | <subdomain> "." <label>

domain_name = rf"(?: {label} (?: \. {label} )* \. {letter}{{2,26}} )"

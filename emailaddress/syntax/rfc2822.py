"""
Regex for RFC2822

These regex are derived from the ABNF in RFC2822, Section 3:

  <https://tools.ietf.org/html/rfc2822#section-3>

Only the tokens that never change with the relaxation criteria live here;
atext, the quoted local-part, the domain and everything built on them are
composed in emailaddress.grammar.

Runs of white space, comments and atoms are atomic groups, so that a failed
match can't try every way of dividing them between neighbouring tokens.
That needs Python 3.11.

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

SPEC_URL = "https://tools.ietf.org/html/rfc2822"


## Primitive tokens (core rules from RFC5234)

# CRLF           =  CR LF

CRLF = r"(?: \r\n )"

# WSP            =  SP / HTAB

WSP = r"[\x20\t]"

# DQUOTE         =  %x22

DQUOTE = r"\""

# NO-WS-CTL       =       %d1-8 /         ; US-ASCII control characters
#                         %d11 /          ;  that do not include the
#                         %d12 /          ;  carriage return, line feed,
#                         %d14-31 /       ;  and white space characters
#                         %d127
#
# Only usable inside a character class.

NO_WS_CTL = r"\x01-\x08\x0b\x0c\x0e-\x1f\x7f"

# text            =       %d1-9 /         ; Characters excluding CR and LF
#                         %d11 /
#                         %d12 /
#                         %d14-127 /
#                         obs-text

text = r"[\x01-\x09\x0b\x0c\x0e-\x7f]"


## Quoted characters (3.2.2)

# quoted-pair     =       ("\" text) / obs-qp

quoted_pair = rf"(?: \\ {text} )"


## Folding white space and comments (3.2.3)

# FWS             =       ([*WSP CRLF] 1*WSP) /   ; Folding white space
#                         obs-FWS

FWS = rf"(?> (?: {WSP}* {CRLF} )? {WSP}+ )"

# ctext           =       NO-WS-CTL /     ; Non white space controls
#                         %d33-39 /       ; The rest of the US-ASCII
#                         %d42-91 /       ;  characters not including "(",
#                         %d93-126        ;  ")", or "\"

ctext = rf"[{NO_WS_CTL}\x21-\x27\x2a-\x5b\x5d-\x7e]"

# ccontent        =       ctext / quoted-pair / comment
#
# Nested comments aren't matched.

ccontent = rf"(?: {ctext} | {quoted_pair} )"

# comment         =       "(" *([FWS] ccontent) [FWS] ")"

comment = rf"(?> \( (?: {FWS}? {ccontent} )* {FWS}? \) )"

# CFWS            =       *([FWS] comment) (([FWS] comment) / FWS)
#
# Same language as 1*([FWS] comment) [FWS] / FWS.

CFWS = rf"(?> (?: {FWS}? {comment} )+ {FWS}? | {FWS} )"

# The CFWS between two words of a phrase. phrase is 1*word, but each word has
# to be set off by FWS or "aaaa" could be read as four words.

word_separator = rf"(?> {comment}* (?: {FWS} {comment}* )+ )"


## Atom (3.2.4)

# atext           =       ALPHA / DIGIT / ; Any character except controls,
#                         "!" / "#" /     ;  SP, and specials.
#                         "$" / "%" /     ;  Used for atoms
#                         "&" / "'" /
#                         "*" / "+" /
#                         "-" / "/" /
#                         "=" / "?" /
#                         "^" / "_" /
#                         "`" / "{" /
#                         "|" / "}" /
#                         "~"
#
# Only usable inside a character class; emailaddress.grammar may add "." and
# "[]" to it.

ATEXT_CHARS = r"a-zA-Z0-9!\x23-\x27*+\-/=?\x5e-\x60\x7b-\x7e"

# atext as used in dot-atoms. This never takes the criteria extensions, so that
# "a.b.c.d.e.f" can only be divided one way; it does admit Thai script.

regular_atext = rf"[\u0e00-\u0e7f{ATEXT_CHARS}]"

# dot-atom-text   =       1*atext *("." 1*atext)

dot_atom_text = rf"(?> {regular_atext}+ (?: \. {regular_atext}+ )* )"


## Quoted strings (3.2.5)

# qtext           =       NO-WS-CTL /     ; Non white space controls
#                         %d33 /          ; The rest of the US-ASCII
#                         %d35-91 /       ;  characters not including "\"
#                         %d93-126        ;  or the quote character

qtext = rf"[{NO_WS_CTL}\x21\x23-\x5b\x5d-\x7e]"

# qtext for a quoted local-part; excludes "(" and ")" unless the criteria
# allow parens in the local-part, in which case qtext is used.

local_part_qtext = rf"[{NO_WS_CTL}\x21\x23-\x27\x2a-\x5b\x5d-\x7e]"

# qcontent        =       qtext / quoted-pair

qcontent = rf"(?: {qtext} | {quoted_pair} )"

# DQUOTE *([FWS] qcontent) [FWS] DQUOTE
#
# quoted-string without the surrounding CFWS.

quoted_string_wo_cfws = rf"(?: {DQUOTE} (?> {FWS}? {qcontent} )* {FWS}? {DQUOTE} )"

# quoted-string   =       [CFWS]
#                         DQUOTE *([FWS] qcontent) [FWS] DQUOTE
#                         [CFWS]

quoted_string = rf"(?: {CFWS}? {quoted_string_wo_cfws} {CFWS}? )"


## Address specification (3.4.1)

# dtext           =       NO-WS-CTL /     ; Non white space controls
#                         %d33-90 /       ; The rest of the US-ASCII
#                         %d94-126        ;  characters not including "[",
#                                         ;  "]", or "\"

dtext = rf"[{NO_WS_CTL}\x21-\x5a\x5e-\x7e]"

# dcontent        =       dtext / quoted-pair

dcontent = rf"(?: {dtext} | {quoted_pair} )"

# "[" *([FWS] dcontent) [FWS] "]"
#
# domain-literal without the surrounding CFWS.

domain_literal_wo_cfws = rf"(?: \[ (?: {FWS}? (?> {dcontent}+ ) )* {FWS}? \] )"


## Normalising personal names

ESCAPED_QUOTE = r"\\\""

ESCAPED_BSLASH = r"\\\\"

"""
The address value handed back to calling code.

InternetAddress only checks that the personal name can be carried in a mail
header in its charset; it doesn't parse anything. Get instances from
emailaddress.parser or emailaddress.header rather than building them from
untrusted text.
"""

from email.header import Header
from email.utils import formataddr, quote
from typing import Any, Optional


class EncodingError(ValueError):
    "The personal name can't be represented in the requested charset."


class InternetAddress:
    "An address and optional personal name, ready for use in a header."

    def __init__(
        self, address: str, personal: Optional[str] = None, charset: str = "utf-8"
    ) -> None:
        self.address = address
        self.personal = personal
        self.charset = charset
        if personal is not None:
            self._verify_encoding(personal)

    def _verify_encoding(self, instr: str) -> None:
        "Raise EncodingError if instr can't be encoded in self.charset."
        if instr.isascii():
            return
        try:
            instr.encode(self.charset)
        except LookupError as why:
            raise EncodingError(f"Unknown charset '{self.charset}'") from why
        except UnicodeEncodeError as why:
            raise EncodingError(
                f"Personal name {instr!r} can't be encoded as {self.charset}"
            ) from why

    def __str__(self) -> str:
        if self.address.isascii():
            return formataddr((self.personal, self.address), self.charset)
        # formataddr refuses non-ASCII (RFC6532) addresses
        if self.personal is None:
            return self.address
        if self.personal.isascii():
            name = f'"{quote(self.personal)}"'
        else:
            name = Header(self.personal, self.charset).encode()
        return f"{name} <{self.address}>"

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} personal={self.personal!r} "
            f"address={self.address!r}>"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, InternetAddress):
            return NotImplemented
        return (self.address, self.personal) == (other.address, other.personal)

    def __hash__(self) -> int:
        return hash((self.address, self.personal))

"""
RFC2822 email address validation and extraction.

Validation lives in emailaddress.validator, single-address extraction in
emailaddress.parser and address-list headers in emailaddress.header.
"""

__version__ = "1.0.0"

"""
Configuration for AddressContext.

Settings live in the [emailaddress] section of an INI file:

    [emailaddress]
    criteria = RECOMMENDED, ALLOW_DOT_IN_A_TEXT
    extract_cfws_personal_names = true
    charset = utf-8

criteria is a preset name or a comma-separated list of flag names (see
emailaddress.criteria).
"""

from configparser import ConfigParser, SectionProxy
from typing import Optional

SECTION = "emailaddress"

DEFAULTS = {
    "criteria": "RECOMMENDED",
    "extract_cfws_personal_names": "False",
    "charset": "utf-8",
}


def load_config(path: Optional[str] = None) -> SectionProxy:
    """
    Load the [emailaddress] section from the file at path, on top of the
    defaults. With no path the defaults are returned; as with
    ConfigParser.read, a file that can't be read is ignored.
    """
    config_parser = ConfigParser()
    config_parser.read_dict({SECTION: DEFAULTS})
    if path is not None:
        config_parser.read(path)
    return config_parser[SECTION]

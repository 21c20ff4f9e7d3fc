""" Configuration file handling """
import configparser
from typing import List, Tuple

from nftsim import constants
from nftsim.errors import NftablesError


class Config(object):

    """Backend configuration read from an ini file:

        [nftsim]
        backend = fake
        family = inet
        table = mytable

        [defines]
        IP = 10.0.0.1
    """

    def __init__(self, configfile: str) -> None:
        self.configfile = configfile
        self.defines: List[Tuple[str, str]] = []

        parser = configparser.ConfigParser()
        # Define names are case sensitive
        parser.optionxform = str  # type: ignore
        if not parser.read(configfile):
            raise NftablesError("Unable to read configuration file %s" % configfile)

        if not parser.has_section(constants.CONFIG_SECTION):
            raise NftablesError(
                "Section [%s] missing in %s" % (constants.CONFIG_SECTION, configfile)
            )

        section = parser[constants.CONFIG_SECTION]
        self.backend = section.get("backend", constants.DEFAULT_BACKEND)
        self.family = section.get("family", constants.INET_FAMILY)
        if self.family not in constants.FAMILIES:
            raise NftablesError(
                "Family '%s' is not understood! (%s)" % (self.family, configfile)
            )

        self.table = section.get("table")
        if not self.table:
            raise NftablesError("No table configured (%s)" % configfile)

        if parser.has_section(constants.CONFIG_DEFINES_SECTION):
            for name, value in parser.items(constants.CONFIG_DEFINES_SECTION):
                self.defines.append((name, value))

    def __repr__(self) -> str:
        return "<Config(backend=%s, family=%s, table=%s)>" % (
            self.backend,
            self.family,
            self.table,
        )

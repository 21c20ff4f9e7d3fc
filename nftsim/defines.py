import re
from typing import Dict, Iterator, List, Optional

from nftsim import constants


class Define(object):

    """A named placeholder, written as $name in rules, types and elements"""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value

    @property
    def placeholder(self) -> str:
        return constants.DEFINE_SIGIL + self.name

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Define):
            return (self.name, self.value) == (other.name, other.value)
        return NotImplemented

    def __repr__(self) -> str:
        return "<Define(%s=%s)>" % (self.name, self.value)


class Defines(object):

    """Ordered list of defines, substituted into strings at write time.

    The input is scanned once; at every position the defines are tried in
    registration order, so a define registered earlier wins when two names
    share a prefix ("$IP" is matched before "$IPSET" is looked at).
    Substituted values are copied literally and never expanded again.
    """

    def __init__(self, defines: Optional[List[Define]] = None) -> None:
        self._defines: List[Define] = []
        self._pattern: Optional["re.Pattern[str]"] = None
        self._values: Dict[str, str] = {}
        for define in defines or []:
            self.define(define.name, define.value)

    @classmethod
    def for_family(cls, family: str) -> "Defines":
        """Seed the default defines for an address family"""
        return cls(
            [Define(name, value) for (name, value) in constants.DEFAULT_DEFINES.get(family, [])]
        )

    def define(self, name: str, value: str) -> None:
        define = Define(name, value)
        self._defines.append(define)
        self._values.setdefault(define.placeholder, define.value)
        self._pattern = re.compile(
            "|".join(re.escape(define.placeholder) for define in self._defines)
        )

    def substitute(self, val: Optional[str]) -> Optional[str]:
        if val is None or self._pattern is None:
            return val
        return self._pattern.sub(lambda match: self._values[match.group(0)], val)

    def __iter__(self) -> Iterator[Define]:
        return iter(self._defines)

    def __len__(self) -> int:
        return len(self._defines)

    def __repr__(self) -> str:
        return "<Defines(%s)>" % ", ".join(repr(define) for define in self._defines)

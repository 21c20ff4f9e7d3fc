from typing import TYPE_CHECKING, List, Optional, Type

import nftsim.lib

if TYPE_CHECKING:
    from ..objects import Element, Rule
    from ..transaction import Transaction


def load_backend(backend: str) -> Type["BaseBackend"]:
    """ Load a backend """
    backend_name = "nftsim.backends.%s.Backend" % backend
    try:
        return nftsim.lib._load_class(backend_name)
    except ImportError:
        raise NotImplementedError("Backend %s is not implemented" % backend)


class BaseBackend(object):

    """Interface shared by every backend operating on a single table.

    The timeout arguments exist so callers can treat backends alike; a
    backend which never blocks is free to ignore them.
    """

    def __init__(self, family: str, table: str) -> None:
        self.family = family
        self.table = table

    def present(self) -> None:
        raise NotImplementedError("Function 'present' not implemented!")

    def define(self, name: str, value: str) -> None:
        raise NotImplementedError("Function 'define' not implemented!")

    def run(self, tx: "Transaction", timeout: Optional[float] = None) -> None:
        raise NotImplementedError("Function 'run' not implemented!")

    def list(self, object_type: str, timeout: Optional[float] = None) -> List[str]:
        raise NotImplementedError("Function 'list' not implemented!")

    def list_rules(self, chain: str, timeout: Optional[float] = None) -> List["Rule"]:
        raise NotImplementedError("Function 'list_rules' not implemented!")

    def list_elements(
        self, object_type: str, name: str, timeout: Optional[float] = None
    ) -> List["Element"]:
        raise NotImplementedError("Function 'list_elements' not implemented!")

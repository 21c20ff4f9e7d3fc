from typing import Iterator, List, Optional, Tuple

from nftsim import constants
from nftsim.errors import PreconditionError
from nftsim.objects import NftablesObject


class Transaction(object):

    """An ordered batch of operations handed to a backend's run().

    Every object is validated for its verb when it is added. The first
    failure is kept in err and everything queued after it is ignored; a
    backend raises the stored error without applying anything.
    """

    def __init__(self) -> None:
        self.operations: List[Tuple[str, NftablesObject]] = []
        self.err: Optional[PreconditionError] = None

    def _operation(self, verb: str, obj: NftablesObject) -> None:
        if self.err is not None:
            return
        try:
            obj.validate(verb)
        except PreconditionError as err:
            self.err = err
            return
        self.operations.append((verb, obj))

    def add(self, obj: NftablesObject) -> None:
        """Add an object, a no-op if it already exists"""
        self._operation(constants.ADD_VERB, obj)

    def create(self, obj: NftablesObject) -> None:
        self._operation(constants.CREATE_VERB, obj)

    def flush(self, obj: NftablesObject) -> None:
        """Flush the contents of a table, chain, set or map"""
        self._operation(constants.FLUSH_VERB, obj)

    def delete(self, obj: NftablesObject) -> None:
        self._operation(constants.DELETE_VERB, obj)

    def __iter__(self) -> Iterator[Tuple[str, NftablesObject]]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)

    def __repr__(self) -> str:
        return "<Transaction(operations=%d, err=%s)>" % (len(self.operations), self.err)

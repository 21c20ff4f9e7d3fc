""" In-memory backend, for unit tests """
from typing import Callable, Dict, List, Optional, TYPE_CHECKING, Union
import warnings

from nftsim import constants, lib
from nftsim.backends import BaseBackend
from nftsim.defines import Defines
from nftsim.errors import NftablesError, NotFoundError, UnsupportedOperationError
from nftsim.objects import Chain, Element, Map, NftablesObject, Rule, Set, Table

if TYPE_CHECKING:
    from ..transaction import Transaction


class _Wrapper(object):

    """Holds a stored object plus the children it owns.

    Fields of the stored object can be read straight off the wrapper.
    """

    _wrapped = ""

    @property
    def record(self) -> NftablesObject:
        """The stored object itself"""
        return self.__dict__[self._wrapped]

    def __getattr__(self, name: str):
        wrapped = self.__dict__.get(self._wrapped)
        if wrapped is None:
            raise AttributeError(name)
        return getattr(wrapped, name)

    def __repr__(self) -> str:
        return lib.object_repr(self)


class FakeTable(_Wrapper):

    _wrapped = "table"

    def __init__(self, table: Table) -> None:
        self.table = table
        self.chains: Dict[str, FakeChain] = {}
        self.sets: Dict[str, FakeSet] = {}
        self.maps: Dict[str, FakeMap] = {}


class FakeChain(_Wrapper):

    _wrapped = "chain"

    def __init__(self, chain: Chain) -> None:
        self.chain = chain
        self.rules: List[Rule] = []

    def flush(self) -> None:
        self.rules = []

    def find_rule(self, handle: int) -> int:
        for index, rule in enumerate(self.rules):
            if rule.handle is not None and rule.handle == handle:
                return index
        return -1


class _FakeElementContainer(_Wrapper):

    def __init__(self) -> None:
        self.elements: List[Element] = []

    def flush(self) -> None:
        self.elements = []

    def _find(self, key: str) -> int:
        for index, element in enumerate(self.elements):
            if element.key == key:
                return index
        return -1

    def find_element(self, *key: str) -> Optional[Element]:
        """Find an element by its (already substituted) key.

        Several arguments are joined into a concatenated key.
        """
        index = self._find(lib.join(*key))
        if index == -1:
            return None
        return self.elements[index]


class FakeSet(_FakeElementContainer):

    _wrapped = "set"

    def __init__(self, set: Set) -> None:
        super().__init__()
        self.set = set


class FakeMap(_FakeElementContainer):

    _wrapped = "map"

    def __init__(self, map: Map) -> None:
        super().__init__()
        self.map = map


FakeContainer = Union[FakeChain, FakeSet, FakeMap]

# Verbs each object kind understands; anything else is an unsupported
# operation. "create" is not implemented for any kind.
SUPPORTED_VERBS = {
    Table: [constants.ADD_VERB, constants.FLUSH_VERB, constants.DELETE_VERB],
    Chain: [constants.ADD_VERB, constants.FLUSH_VERB, constants.DELETE_VERB],
    Set: [constants.ADD_VERB, constants.FLUSH_VERB, constants.DELETE_VERB],
    Map: [constants.ADD_VERB, constants.FLUSH_VERB, constants.DELETE_VERB],
    Rule: [constants.ADD_VERB, constants.DELETE_VERB],
    Element: [constants.ADD_VERB, constants.DELETE_VERB],
}


class Fake(BaseBackend):

    """Fake backend which keeps a single table in memory.

    Transactions are applied operation by operation. The first failing
    operation aborts the run, but everything applied before it stays
    applied: there is no rollback.
    """

    def __init__(self, family: str, table: str) -> None:
        if family not in constants.FAMILIES:
            raise NftablesError("Family '%s' is not understood!" % family)
        super().__init__(family, table)
        self.defines = Defines.for_family(family)
        self.next_handle = 0

        # Set once the table has been added
        self.fake_table: Optional[FakeTable] = None

        self._handlers: Dict[type, Callable[[str, NftablesObject], None]] = {
            Table: self._run_table,
            Chain: self._run_chain,
            Rule: self._run_rule,
            Set: self._run_set,
            Map: self._run_map,
            Element: self._run_element,
        }

    def present(self) -> None:
        """The fake backend is always available"""
        return None

    def define(self, name: str, value: str) -> None:
        """Register a define, used by every string written from now on"""
        self.defines.define(name, value)

    #
    # Apply
    #
    def run(self, tx: "Transaction", timeout: Optional[float] = None) -> None:
        """Apply a transaction, raising the first error encountered"""
        if tx.err is not None:
            raise tx.err

        for verb, obj in tx.operations:
            if self.fake_table is None:
                if not isinstance(obj, Table) or verb != constants.ADD_VERB:
                    raise NotFoundError('no such table "%s %s"' % (self.family, self.table))

            if verb in constants.HANDLE_VERBS:
                self.next_handle += 1

            handler = self._handlers.get(type(obj))
            if handler is None:
                raise UnsupportedOperationError("unhandled object type %s" % type(obj).__name__)
            # Checked before existence, so create of a missing object is unsupported too
            if verb not in SUPPORTED_VERBS[type(obj)]:
                raise UnsupportedOperationError(
                    'unhandled operation "%s" for %s' % (verb, obj.kind)
                )
            handler(verb, obj)

    def _run_table(self, verb: str, obj: Table) -> None:
        if verb == constants.DELETE_VERB:
            self.fake_table = None
            return

        if verb == constants.FLUSH_VERB:
            self.fake_table = None

        if self.fake_table is None:
            table = Table(
                comment=obj.comment,
                handle=self.next_handle,
                family=self.family,
                name=self.table,
            )
            self.fake_table = FakeTable(table)

    def _run_container(
        self,
        verb: str,
        obj: Union[Chain, Set, Map],
        collection: Dict[str, FakeContainer],
        factory: Callable[[NftablesObject], FakeContainer],
    ) -> None:
        """Add, flush or delete a chain, set or map keyed by name"""
        existing = collection.get(obj.name)

        if verb == constants.ADD_VERB:
            if existing is not None:
                return
            stored = obj.copy()
            stored.handle = self.next_handle
            if isinstance(stored, (Set, Map)):
                stored.type = self.defines.substitute(stored.type)
                stored.typeof = self.defines.substitute(stored.typeof)
            collection[obj.name] = factory(stored)
            return

        if existing is None:
            raise NotFoundError("no such %s %r" % (obj.kind, obj.name))

        if verb == constants.FLUSH_VERB:
            existing.flush()
        elif verb == constants.DELETE_VERB:
            if obj.handle is not None:
                warnings.warn(
                    "Fake backend: deleting %s '%s' by name, handle %d is ignored"
                    % (obj.kind, obj.name, obj.handle)
                )
            del collection[obj.name]

    def _run_chain(self, verb: str, obj: Chain) -> None:
        self._run_container(verb, obj, self.fake_table.chains, FakeChain)

    def _run_set(self, verb: str, obj: Set) -> None:
        self._run_container(verb, obj, self.fake_table.sets, FakeSet)

    def _run_map(self, verb: str, obj: Map) -> None:
        self._run_container(verb, obj, self.fake_table.maps, FakeMap)

    def _run_rule(self, verb: str, obj: Rule) -> None:
        chain = self.fake_table.chains.get(obj.chain)
        if chain is None:
            raise NotFoundError("no such chain %r" % obj.chain)

        if verb == constants.ADD_VERB:
            rule = obj.copy()
            rule.rule = self.defines.substitute(rule.rule)
            rule.handle = self.next_handle
            chain.rules.append(rule)
        elif verb == constants.DELETE_VERB:
            index = chain.find_rule(obj.handle)
            if index == -1:
                raise NotFoundError("no rule with handle %d in chain %r" % (obj.handle, obj.chain))
            del chain.rules[index]

    def _run_element(self, verb: str, obj: Element) -> None:
        if obj.is_map_element:
            parent: Optional[_FakeElementContainer] = self.fake_table.maps.get(obj.name)
        else:
            parent = self.fake_table.sets.get(obj.name)
        if parent is None:
            raise NotFoundError("no such %s %r" % (obj.parent_kind, obj.name))

        key = self.defines.substitute(obj.key)
        index = parent._find(key)

        if verb == constants.ADD_VERB:
            element = obj.copy()
            element.key = key
            if obj.is_map_element:
                element.value = self.defines.substitute(element.value)
            if index != -1:
                parent.elements[index] = element
            else:
                parent.elements.append(element)
        elif verb == constants.DELETE_VERB:
            if index == -1:
                raise NotFoundError(
                    "no such element %r in %s %r" % (key, obj.parent_kind, obj.name)
                )
            del parent.elements[index]

    #
    # Read accessors
    #
    def _require_table(self) -> FakeTable:
        if self.fake_table is None:
            raise NotFoundError('no such table "%s %s"' % (self.family, self.table))
        return self.fake_table

    def list(self, object_type: str, timeout: Optional[float] = None) -> List[str]:
        """List the names of the chains, sets or maps in the table"""
        table = self._require_table()
        attribute = constants.LIST_OBJECT_TYPES.get(object_type)
        if attribute is None:
            raise NotFoundError("unsupported object type %r" % object_type)
        return sorted(getattr(table, attribute))

    def list_rules(self, chain: str, timeout: Optional[float] = None) -> List[Rule]:
        """List the rules of a chain, in order"""
        fake_chain = None
        if self.fake_table is not None:
            fake_chain = self.fake_table.chains.get(chain)
        if fake_chain is None:
            raise NotFoundError("no such chain %r" % chain)
        return list(fake_chain.rules)

    def list_elements(
        self, object_type: str, name: str, timeout: Optional[float] = None
    ) -> List[Element]:
        """List the elements of a set or map, in order"""
        container: Optional[_FakeElementContainer] = None
        if self.fake_table is not None:
            if object_type == "set":
                container = self.fake_table.sets.get(name)
            elif object_type == "map":
                container = self.fake_table.maps.get(name)
        if container is None:
            raise NotFoundError("no such %s %r" % (object_type, name))
        return list(container.elements)

    #
    # Serializer
    #
    def dump(self) -> str:
        """Dump the table as a series of add operations.

        The output looks like an nft transaction, but is not guaranteed to be
        usable as one: chains may be referenced by rules before they are
        added, for instance. Chains, sets and maps are sorted by name; rules
        and elements keep their stored order.
        """
        if self.fake_table is None:
            return ""

        add = constants.ADD_VERB
        table = self.fake_table
        output = [table.record.write_operation(add, self.family, self.table)]

        for name in sorted(table.chains):
            chain = table.chains[name]
            output.append(chain.record.write_operation(add, self.family, self.table))
            for rule in chain.rules:
                # Handles depend on the order operations were run in
                dump_rule = rule.copy()
                dump_rule.handle = None
                dump_rule.index = None
                output.append(dump_rule.write_operation(add, self.family, self.table))

        for collection in (table.sets, table.maps):
            for name in sorted(collection):
                container = collection[name]
                output.append(container.record.write_operation(add, self.family, self.table))
                for element in container.elements:
                    output.append(element.write_operation(add, self.family, self.table))

        return "".join(output)


Backend = Fake

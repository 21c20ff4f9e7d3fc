""" Object model: tables, chains, rules, sets, maps and elements """
import copy
from typing import List, Optional

from nftsim import constants, lib
from nftsim.errors import ValidationError


class NftablesObject(object):

    """Base for every object that can be part of a transaction"""

    kind = "object"

    def validate(self, verb: str) -> None:
        raise NotImplementedError("Function 'validate' not implemented!")

    def write_operation(self, verb: str, family: str, table: str) -> str:
        raise NotImplementedError("Function 'write_operation' not implemented!")

    def copy(self):
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return vars(self) == vars(other)
        return NotImplemented

    def __repr__(self) -> str:
        return lib.object_repr(self)


class Table(NftablesObject):

    """The table; its family and name belong to the backend"""

    kind = "table"

    def __init__(
        self,
        comment: Optional[str] = None,
        handle: Optional[int] = None,
        family: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        self.family = family
        self.name = name
        self.comment = comment
        self.handle = handle

    def validate(self, verb: str) -> None:
        if self.family is not None and self.family not in constants.FAMILIES:
            raise ValidationError("Family '%s' is not understood! (table)" % self.family)

    def write_operation(self, verb: str, family: str, table: str) -> str:
        line = "%s table %s %s" % (verb, family, table)
        if verb == constants.ADD_VERB and self.comment:
            line += " { comment %s ; }" % lib.quote(self.comment)
        return line + "\n"


class Chain(NftablesObject):

    """A chain, optionally hooked as a base chain"""

    kind = "chain"

    def __init__(
        self,
        name: str,
        type: Optional[str] = None,
        hook: Optional[str] = None,
        priority: Optional[str] = None,
        device: Optional[str] = None,
        comment: Optional[str] = None,
        handle: Optional[int] = None,
    ) -> None:
        self.name = name
        self.type = type
        self.hook = hook
        self.priority = priority
        self.device = device
        self.comment = comment
        self.handle = handle

    def validate(self, verb: str) -> None:
        if not self.name:
            raise ValidationError("Chain needs a name, handles alone do not identify it")
        if self.hook and not self.type:
            raise ValidationError("Chain '%s' has a hook but no type" % self.name)
        if self.type and not self.hook:
            raise ValidationError("Chain '%s' has a type but no hook" % self.name)
        if self.device and not self.hook:
            raise ValidationError("Chain '%s' has a device but no hook" % self.name)

    def write_operation(self, verb: str, family: str, table: str) -> str:
        if verb == constants.DELETE_VERB and self.handle is not None:
            return "%s chain %s %s handle %d\n" % (verb, family, table, self.handle)

        line = "%s chain %s %s %s" % (verb, family, table, self.name)
        if verb in constants.HANDLE_VERBS:
            body = []
            if self.type:
                base = "type %s hook %s" % (self.type, self.hook)
                if self.device:
                    base += " device %s" % lib.quote(self.device)
                if self.priority is not None:
                    base += " priority %s" % self.priority
                body.append(base)
            if self.comment:
                body.append("comment %s" % lib.quote(self.comment))
            if body:
                line += " { %s ; }" % " ; ".join(body)
        return line + "\n"


class Rule(NftablesObject):

    """A rule in a chain, identified by its handle once stored"""

    kind = "rule"

    def __init__(
        self,
        chain: str,
        rule: Optional[str] = None,
        comment: Optional[str] = None,
        index: Optional[int] = None,
        handle: Optional[int] = None,
    ) -> None:
        self.chain = chain
        self.rule = rule
        self.comment = comment
        self.index = index
        self.handle = handle

    def validate(self, verb: str) -> None:
        if not self.chain:
            raise ValidationError("Rule needs a chain")
        if verb in constants.HANDLE_VERBS:
            if not self.rule:
                raise ValidationError("Rule in chain '%s' has no rule text" % self.chain)
            if self.index is not None and self.handle is not None:
                raise ValidationError(
                    "Rule in chain '%s' cannot have both index and handle" % self.chain
                )
        elif verb == constants.DELETE_VERB:
            if self.handle is None:
                raise ValidationError("Rule delete in chain '%s' needs a handle" % self.chain)

    def write_operation(self, verb: str, family: str, table: str) -> str:
        line = "%s rule %s %s %s" % (verb, family, table, self.chain)
        if self.index is not None:
            line += " index %d" % self.index
        elif self.handle is not None:
            line += " handle %d" % self.handle

        if verb in constants.HANDLE_VERBS:
            if self.rule:
                line += " %s" % self.rule
            if self.comment:
                line += " comment %s" % lib.quote(self.comment)
        return line + "\n"


class _SetBase(NftablesObject):

    """Shared fields and rendering of sets and maps"""

    def __init__(
        self,
        name: str,
        type: Optional[str] = None,
        typeof: Optional[str] = None,
        flags: Optional[List[str]] = None,
        timeout: Optional[int] = None,
        gc_interval: Optional[int] = None,
        size: Optional[int] = None,
        policy: Optional[str] = None,
        auto_merge: Optional[bool] = None,
        comment: Optional[str] = None,
        handle: Optional[int] = None,
    ) -> None:
        self.name = name
        self.type = type
        self.typeof = typeof
        self.flags = flags
        self.timeout = timeout
        self.gc_interval = gc_interval
        self.size = size
        self.policy = policy
        self.auto_merge = auto_merge
        self.comment = comment
        self.handle = handle

    def validate(self, verb: str) -> None:
        if not self.name:
            raise ValidationError(
                "%s needs a name, handles alone do not identify it" % self.kind.capitalize()
            )
        if verb in constants.HANDLE_VERBS:
            if bool(self.type) == bool(self.typeof):
                raise ValidationError(
                    "%s '%s' needs exactly one of type and typeof" % (self.kind.capitalize(), self.name)
                )

    def write_operation(self, verb: str, family: str, table: str) -> str:
        if verb == constants.DELETE_VERB and self.handle is not None:
            return "%s %s %s %s handle %d\n" % (verb, self.kind, family, table, self.handle)

        line = "%s %s %s %s %s" % (verb, self.kind, family, table, self.name)
        if verb in constants.HANDLE_VERBS:
            body = []
            if self.type:
                body.append("type %s" % self.type)
            elif self.typeof:
                body.append("typeof %s" % self.typeof)
            if self.flags:
                body.append("flags %s" % ",".join(self.flags))
            if self.timeout is not None:
                body.append("timeout %ds" % self.timeout)
            if self.gc_interval is not None:
                body.append("gc-interval %ds" % self.gc_interval)
            if self.size is not None:
                body.append("size %d" % self.size)
            if self.policy:
                body.append("policy %s" % self.policy)
            if self.auto_merge:
                body.append("auto-merge")
            if self.comment:
                body.append("comment %s" % lib.quote(self.comment))
            if body:
                line += " { %s ; }" % " ; ".join(body)
        return line + "\n"


class Set(_SetBase):

    """A named set; type is the key type (e.g. ipv4_addr)"""

    kind = "set"


class Map(_SetBase):

    """A named map; type describes key and value (e.g. ipv4_addr : verdict)"""

    kind = "map"


class Element(NftablesObject):

    """A set element (key only) or a map element (key and value).

    Which parent an element belongs to follows from the value: an element
    with a value is looked up in the maps, one without in the sets.
    """

    kind = "element"

    def __init__(
        self,
        name: str,
        key: str,
        value: Optional[str] = None,
        comment: Optional[str] = None,
    ) -> None:
        self.name = name
        self.key = key
        self.value = value
        self.comment = comment

    @property
    def is_map_element(self) -> bool:
        return bool(self.value)

    @property
    def parent_kind(self) -> str:
        return "map" if self.is_map_element else "set"

    def validate(self, verb: str) -> None:
        if not self.name:
            raise ValidationError("Element needs a set or map name")
        if not self.key:
            raise ValidationError("Element of %s '%s' needs a key" % (self.parent_kind, self.name))

    def write_operation(self, verb: str, family: str, table: str) -> str:
        line = "%s element %s %s %s { %s" % (verb, family, table, self.name, self.key)
        if self.is_map_element:
            line += " : %s" % self.value
        if verb in constants.HANDLE_VERBS and self.comment:
            line += " comment %s" % lib.quote(self.comment)
        return line + " }\n"

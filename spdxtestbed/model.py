# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The document model the comparison engine works against.

The engine never touches concrete document classes. It only talks to a
DocumentModelAdapter, which answers four questions about a node: its
type, its property names, the value of a property, and whether a
property holds an unordered collection. NodeAdapter implements these
for trees of DocumentNode objects.
"""

from .diff_format import Absent


NOASSERTION_VALUE = "NOASSERTION"


class _NoAssertionType(object):
    """Sentinel for the "no assertion" value of a property."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_NoAssertionType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NoAssertion"

    def __str__(self):
        return NOASSERTION_VALUE

    def __reduce__(self):
        return (_NoAssertionType, ())


NoAssertion = _NoAssertionType()


class DocumentNode(dict):
    """A typed object in a document tree.

    Properties are stored as dict items and are also available as
    attributes. The type identifier is part of equality: two nodes
    with equal properties but different types are not equal.
    """

    def __init__(self, type_id, *args, **kwargs):
        super(DocumentNode, self).__init__(*args, **kwargs)
        self.__dict__["type_id"] = type_id

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        if name == "type_id":
            raise AttributeError("type_id of a DocumentNode cannot be changed")
        self[name] = value

    def __eq__(self, other):
        if not isinstance(other, DocumentNode):
            return False
        return self.type_id == other.type_id and dict.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return "{}({})".format(self.type_id, dict.__repr__(self))

    def copy(self):
        return DocumentNode(self.type_id, self)


def is_semantically_empty(value):
    """Whether value carries no information.

    Absence, None, the no-assertion sentinel (or its string form), and
    empty collections are all equivalent to a property that is not set.
    A DocumentNode is never empty, since its type alone is information.
    """
    if value is None or value is Absent or value is NoAssertion:
        return True
    if isinstance(value, DocumentNode):
        return False
    if isinstance(value, str):
        return value == NOASSERTION_VALUE
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def is_collection(value):
    return isinstance(value, (list, tuple, set, frozenset))


class DocumentModelAdapter(object):
    """Capability set the comparison engine needs from a document model."""

    def type_of(self, node):
        raise NotImplementedError

    def property_names(self, node):
        raise NotImplementedError

    def get_property(self, node, name):
        """Return the value of property name on node, or Absent."""
        raise NotImplementedError

    def is_unordered_collection(self, type_id, name):
        raise NotImplementedError

    def is_node(self, value):
        raise NotImplementedError

    def declared_properties(self, type_id):
        """Return the property names a type may carry, or None if unknown."""
        return None

    def declared_types(self):
        """Return the type ids the adapter declares properties for."""
        return ()

    def rebuild(self, node, properties):
        """Return a new node of the same type as node holding properties."""
        raise NotImplementedError


class NodeAdapter(DocumentModelAdapter):
    """Adapter for trees of DocumentNode objects.

    Parameters:
        unordered: property names whose collections are compared without
            regard to order. Entries are either a bare property name,
            "TypeId.name" to restrict it to one type, or "*" for all.
        declared: optional mapping from type id to its known property names.
    """

    def __init__(self, unordered=(), declared=None):
        unordered = set(unordered)
        self.all_unordered = "*" in unordered
        unordered.discard("*")
        self.unordered = frozenset(unordered)
        self.declared = dict(declared or {})

    def type_of(self, node):
        return node.type_id

    def property_names(self, node):
        return set(node.keys())

    def get_property(self, node, name):
        return node.get(name, Absent)

    def is_unordered_collection(self, type_id, name):
        if self.all_unordered:
            return True
        return name in self.unordered or "{}.{}".format(type_id, name) in self.unordered

    def is_node(self, value):
        return isinstance(value, DocumentNode)

    def declared_properties(self, type_id):
        names = self.declared.get(type_id)
        return None if names is None else set(names)

    def declared_types(self):
        return set(self.declared)

    def rebuild(self, node, properties):
        return DocumentNode(node.type_id, properties)

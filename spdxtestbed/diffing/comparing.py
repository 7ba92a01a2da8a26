# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager

from ..log import StructuralCycle
from ..model import is_collection, is_semantically_empty
from ..utils import ANONYMOUS, join_path

__all__ = [
    "Walk", "equivalent", "iter_properties", "match_multisets", "without_ignored",
]


class Walk(object):
    """State of a single comparison call.

    Tracks the node pairs on the current recursion path, and which
    property names, types and ignore rules the traversal has met.
    """

    def __init__(self, deep=True):
        self.deep = deep
        self.active = set()
        self.matched_rules = set()
        self.seen_names = set()
        self.seen_types = set()

    @contextmanager
    def visiting(self, a, b, path):
        key = (id(a), id(b))
        if key in self.active:
            raise StructuralCycle(path)
        self.active.add(key)
        try:
            yield
        finally:
            self.active.discard(key)


def iter_properties(a, b, path, config, walk):
    """Yield (name, path, avalue, bvalue) for the properties of two nodes.

    Names come from both nodes in sorted order. Ignored properties
    are skipped and their rule recorded on the walk.
    """
    adapter = config.adapter
    walk.seen_types.add(adapter.type_of(a))
    walk.seen_types.add(adapter.type_of(b))
    names = set(adapter.property_names(a)) | set(adapter.property_names(b))
    # Callers may stop early, so all names are recorded before the first yield
    walk.seen_names.update(names)
    for name in sorted(names):
        subpath = join_path(path, name)
        rule = config.ignore_rule(subpath, name)
        if rule is not None:
            walk.matched_rules.add(rule)
            continue
        yield name, subpath, adapter.get_property(a, name), adapter.get_property(b, name)


def match_multisets(xs, ys, same):
    """Pair up equal elements of two collections regardless of order.

    Returns the elements of xs and of ys that found no partner.
    """
    remaining = list(ys)
    unmatched = []
    for x in xs:
        for j, y in enumerate(remaining):
            if same(x, y):
                del remaining[j]
                break
        else:
            unmatched.append(x)
    return unmatched, remaining


def is_unordered(x, y, type_id, name, adapter):
    if isinstance(x, (set, frozenset)) or isinstance(y, (set, frozenset)):
        return True
    return adapter.is_unordered_collection(type_id, name)


def equivalent(x, y, config, walk, path="", type_id=None, name=None):
    """Whether x and y carry the same information.

    Applies the same rules as a deep comparison: empty values are equal
    to each other, unordered collections ignore order and ignored
    properties are skipped. Nothing is copied or modified.
    """
    xempty = is_semantically_empty(x)
    yempty = is_semantically_empty(y)
    if xempty or yempty:
        return xempty and yempty

    adapter = config.adapter
    if adapter.is_node(x) and adapter.is_node(y):
        node_type = adapter.type_of(x)
        if node_type != adapter.type_of(y):
            return False
        with walk.visiting(x, y, path):
            for prop, subpath, xv, yv in iter_properties(x, y, path, config, walk):
                if not equivalent(xv, yv, config, walk, subpath, node_type, prop):
                    return False
        return True

    if is_collection(x) and is_collection(y):
        if is_unordered(x, y, type_id, name, adapter):
            elempath = join_path(path, ANONYMOUS)
            only_x, only_y = match_multisets(
                x, y, lambda u, v: equivalent(u, v, config, walk, elempath, type_id, name))
            return not only_x and not only_y
        if len(x) != len(y):
            return False
        for i, (u, v) in enumerate(zip(x, y)):
            if not equivalent(u, v, config, walk, join_path(path, i), type_id, name):
                return False
        return True

    return x == y


def without_ignored(value, path, config, walk, type_id=None, name=None):
    """Return value with the properties ignored below path left out.

    Used for values reported whole. Nodes holding an ignored property
    are rebuilt through the adapter; the compared documents are not
    modified.
    """
    if not config.ignored_paths:
        return value

    adapter = config.adapter
    if adapter.is_node(value):
        node_type = adapter.type_of(value)
        walk.seen_types.add(node_type)
        properties = {}
        with walk.visiting(value, value, path):
            for prop in sorted(adapter.property_names(value)):
                walk.seen_names.add(prop)
                subpath = join_path(path, prop)
                rule = config.ignore_rule(subpath, prop)
                if rule is not None:
                    walk.matched_rules.add(rule)
                    continue
                properties[prop] = without_ignored(
                    adapter.get_property(value, prop), subpath, config, walk, node_type, prop)
        return adapter.rebuild(value, properties)

    if isinstance(value, (list, tuple)):
        if is_unordered(value, value, type_id, name, adapter):
            elempath = join_path(path, ANONYMOUS)
            items = [without_ignored(v, elempath, config, walk, type_id, name) for v in value]
        else:
            items = [without_ignored(v, join_path(path, i), config, walk, type_id, name)
                     for i, v in enumerate(value)]
        return type(value)(items)

    return value

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .. import log
from ..diff_format import Absent, CLASS_KEY, DifferenceSet
from ..log import InvalidInput, UnknownIgnoredProperty
from ..model import is_collection, is_semantically_empty
from ..utils import ANONYMOUS, join_path, r_is_int, split_path

from .comparing import (
    Walk, equivalent, is_unordered, iter_properties, match_multisets, without_ignored,
)
from .config import CompareConfig

__all__ = ["compare"]


def compare(a, b, deep=True, ignored_paths=(), adapter=None, strict=False, config=None):
    """Compute the semantic differences between two document nodes.

    Returns a DifferenceSet mapping each differing property path to a
    (path, a, b) entry, where a side without information is Absent.
    Nodes of different types yield a single entry keyed "class".

    If deep is false, nested nodes are compared as plain values
    instead of being recursed into.

    A CompareConfig can be given instead of adapter, ignored_paths and
    strict, in which case those arguments are not used.
    """
    if config is None:
        config = CompareConfig(adapter=adapter, ignored_paths=ignored_paths, strict=strict)
    adapter = config.adapter

    for node in (a, b):
        if node is None:
            raise InvalidInput("Cannot compare a missing document node.")
        if not adapter.is_node(node):
            raise InvalidInput(
                "Can only compare document nodes, got {}.".format(type(node).__name__))

    walk = Walk(deep=deep)
    differences = DifferenceSet()
    atype = adapter.type_of(a)
    btype = adapter.type_of(b)
    if atype != btype:
        walk.seen_types.update((atype, btype))
        differences.add(CLASS_KEY, atype, btype)
    else:
        compare_nodes(a, b, "", config, walk, differences)

    check_ignore_rules(config, walk)

    log.debug("Found %d differences comparing %s against %s", len(differences), atype, btype)
    return differences


def compare_nodes(a, b, path, config, walk, differences):
    """Compare all properties of two nodes of the same type."""
    type_id = config.adapter.type_of(a)
    log.debug("Comparing %s nodes at %s", type_id, path or "/")
    with walk.visiting(a, b, path):
        for name, subpath, avalue, bvalue in iter_properties(a, b, path, config, walk):
            compare_values(avalue, bvalue, subpath, type_id, name, config, walk, differences)


def compare_child_nodes(a, b, path, config, walk, differences):
    adapter = config.adapter
    atype = adapter.type_of(a)
    btype = adapter.type_of(b)
    if atype != btype:
        differences.add(join_path(path, CLASS_KEY), atype, btype)
    else:
        compare_nodes(a, b, path, config, walk, differences)


def compare_values(avalue, bvalue, path, type_id, name, config, walk, differences):
    """Compare the values of property name at path, adding any differences."""
    aempty = is_semantically_empty(avalue)
    bempty = is_semantically_empty(bvalue)
    if aempty and bempty:
        return
    if aempty or bempty:
        # Exclusive property, reported whole
        report(avalue, bvalue, path, type_id, name, config, walk, differences)
        return

    adapter = config.adapter
    if adapter.is_node(avalue) and adapter.is_node(bvalue):
        if walk.deep:
            compare_child_nodes(avalue, bvalue, path, config, walk, differences)
        else:
            report(avalue, bvalue, path, type_id, name, config, walk, differences)
    elif is_collection(avalue) and is_collection(bvalue):
        if is_unordered(avalue, bvalue, type_id, name, adapter):
            compare_unordered(avalue, bvalue, path, type_id, name, config, walk, differences)
        else:
            compare_ordered(avalue, bvalue, path, type_id, name, config, walk, differences)
    elif avalue != bvalue:
        differences.add(path, avalue, bvalue)


def report(avalue, bvalue, path, type_id, name, config, walk, differences):
    """Add an entry for values reported whole, without their ignored properties.

    Semantically empty sides become Absent. Nothing is added if the
    values are equal once ignored properties are left out.
    """
    a = Absent if is_semantically_empty(avalue) else without_ignored(
        avalue, path, config, walk, type_id, name)
    b = Absent if is_semantically_empty(bvalue) else without_ignored(
        bvalue, path, config, walk, type_id, name)
    if a is Absent and b is Absent:
        return
    if a != b:
        differences.add(path, a, b)


def compare_unordered(a, b, path, type_id, name, config, walk, differences):
    """Compare two collections as multisets.

    Elements have no index, so the elements without a partner on the
    other side are grouped per side into one entry at the anonymous
    element path, e.g. /annotations/*. The collection itself is only
    reported when it is empty on one side.
    """
    elempath = join_path(path, ANONYMOUS)
    if walk.deep:
        def same(x, y):
            return equivalent(x, y, config, walk, elempath, type_id, name)
    else:
        a = [without_ignored(x, elempath, config, walk, type_id, name) for x in a]
        b = [without_ignored(y, elempath, config, walk, type_id, name) for y in b]

        def same(x, y):
            return x == y

    only_a, only_b = match_multisets(a, b, same)
    if walk.deep:
        only_a = [without_ignored(x, elempath, config, walk, type_id, name) for x in only_a]
        only_b = [without_ignored(y, elempath, config, walk, type_id, name) for y in only_b]
    if only_a or only_b:
        differences.add(elempath, only_a or Absent, only_b or Absent)


def compare_ordered(a, b, path, type_id, name, config, walk, differences):
    """Compare two sequences index by index, then report the longer tail."""
    n = min(len(a), len(b))
    for i in range(n):
        compare_values(a[i], b[i], join_path(path, i), type_id, name, config, walk, differences)
    for i in range(n, len(a)):
        report(a[i], Absent, join_path(path, i), type_id, name, config, walk, differences)
    for i in range(n, len(b)):
        report(Absent, b[i], join_path(path, i), type_id, name, config, walk, differences)


def _rule_property_name(rule):
    parts = [p for p in split_path(rule) if p != ANONYMOUS and not r_is_int.match(p)]
    return parts[-1] if parts else rule


def check_ignore_rules(config, walk):
    """Find ignore rules that name no property the compared documents know.

    A rule is known if it matched during the walk, if its property name
    was seen on a compared node, or if any type the adapter declares
    carries that property.
    """
    adapter = config.adapter
    types = set(walk.seen_types) | set(adapter.declared_types())
    unknown = set()
    for rule in config.ignored_paths:
        if rule in walk.matched_rules:
            continue
        name = _rule_property_name(rule)
        if name in walk.seen_names:
            continue
        if any(name in (adapter.declared_properties(t) or ()) for t in types):
            continue
        unknown.add(rule)

    if not unknown:
        return
    if config.strict:
        raise UnknownIgnoredProperty(unknown)
    log.warning("Ignore rules do not match any known property: %s", ", ".join(sorted(unknown)))

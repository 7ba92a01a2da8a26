# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import enum
import json
from collections.abc import Mapping

from .diff_format import (
    Absent, CLASS_KEY, PatchOp, op_add, op_remove, op_replace, op_order,
)
from .log import PatchFormatError
from .model import NoAssertion, NOASSERTION_VALUE, is_semantically_empty
from .utils import ANONYMOUS, join_path, path_sort_key, split_path


__all__ = ["to_patch", "to_json_value", "patch_to_json"]


def to_json_value(value):
    """Convert a compared value to plain json-serializable data.

    Nodes become dicts without their semantically empty properties,
    so a node renders the way it would appear in a serialized document.
    """
    if isinstance(value, Mapping):
        return {
            str(k): to_json_value(v)
            for k, v in sorted(value.items())
            if not is_semantically_empty(v)
        }
    elif isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    elif isinstance(value, (set, frozenset)):
        return sorted((to_json_value(v) for v in value), key=json.dumps)
    elif value is NoAssertion:
        return NOASSERTION_VALUE
    elif isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    elif isinstance(value, enum.Enum):
        return value.value
    elif value is Absent:
        raise PatchFormatError("Absent values cannot be rendered.")
    elif value is None or isinstance(value, (str, int, float)):
        return value
    elif isinstance(value, type):
        # Type ids given as classes
        return value.__name__
    return str(value)


def _pointer(path):
    # The root type entry has no leading slash
    if path == CLASS_KEY:
        return join_path(CLASS_KEY)
    return path


def _op_kind(entry):
    if entry.a is Absent:
        return PatchOp.ADD
    elif entry.b is Absent:
        return PatchOp.REMOVE
    return PatchOp.REPLACE


def _entry_ops(entry, path, parts):
    if parts and parts[-1] == ANONYMOUS:
        # Unmatched elements of an unordered collection: the elements
        # only in A are removed and those only in B added, never replaced
        ops = []
        if entry.a is not Absent:
            ops.append(op_remove(path, to_json_value(entry.a)))
        if entry.b is not Absent:
            ops.append(op_add(path, to_json_value(entry.b)))
        return ops

    kind = _op_kind(entry)
    if kind == PatchOp.ADD:
        return [op_add(path, to_json_value(entry.b))]
    elif kind == PatchOp.REMOVE:
        return [op_remove(path, to_json_value(entry.a))]
    return [op_replace(path, to_json_value(entry.a), to_json_value(entry.b))]


def _folding_ancestor(parts, one_sided):
    for k in range(len(parts) - 1, 0, -1):
        kind = one_sided.get(tuple(parts[:k]))
        if kind is not None:
            return tuple(parts[:k]), kind
    return None, None


def to_patch(differences):
    """Render a DifferenceSet as an ordered list of patch entries.

    A value present in the first document only is removed, one present
    in the second only is added, and differing values are replaced.
    Unmatched elements of an unordered collection are removed and added
    at the anonymous element path (e.g. /annotations/*), leaving the
    matched elements untouched.

    Entries below a path that is added (or removed) as a whole are
    folded into that single operation, whose value already holds them.
    Entries are ordered by path, then by add < remove < replace.
    """
    entries = sorted(
        differences.values(),
        key=lambda e: path_sort_key(_pointer(e.path)))

    one_sided = {}
    patch = []
    for e in entries:
        path = _pointer(e.path)
        parts = split_path(path)
        kind = _op_kind(e)

        ancestor, ancestor_kind = _folding_ancestor(parts, one_sided)
        if ancestor is not None:
            if kind != ancestor_kind:
                raise PatchFormatError(
                    "Cannot {} at {} below {} of {}.".format(
                        kind, path, ancestor_kind, join_path(list(ancestor))))
            continue

        patch.extend(_entry_ops(e, path, parts))

        if kind != PatchOp.REPLACE:
            one_sided[tuple(parts)] = kind

    patch.sort(key=lambda op: (path_sort_key(op.path), op_order[op.op]))
    return patch


def patch_to_json(patch, indent=2):
    """Render a patch as JSON text, one object per operation."""
    return json.dumps(patch, indent=indent, separators=(",", ": "))

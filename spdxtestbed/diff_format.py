# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

from .log import PatchFormatError


class _AbsentType(object):
    """Marker for the side of a difference where a property carries no value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_AbsentType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Absent"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_AbsentType, ())


# Sentinel to allow None as a compared value
Absent = _AbsentType()

# Key of the entry reporting that two compared nodes have different types
CLASS_KEY = "class"


class _AttrDict(dict):
    """Minimal dict providing attribute access to its keys."""
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DifferenceEntry(_AttrDict):
    """A single (path, a, b) difference between two documents.

    Either `a` or `b` may be `Absent`, marking a property present
    on one side only.
    """

    @property
    def is_exclusive(self):
        return self["a"] is Absent or self["b"] is Absent

    def swapped(self):
        return DifferenceEntry(path=self["path"], a=self["b"], b=self["a"])


def difference(path, a, b):
    "Create a difference entry for values a and b found at path."
    return DifferenceEntry(path=path, a=a, b=b)


class DifferenceSet(dict):
    """Mapping from path to DifferenceEntry for one comparison."""

    def append(self, entry):
        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, DifferenceEntry)
        assert "path" in entry
        assert not (entry.a is Absent and entry.b is Absent), (
            'difference at %r must have a value on at least one side' % entry.path)
        assert entry.path not in self, 'multiple differences at path: %r' % entry.path

        self[entry.path] = entry

    def add(self, path, a, b):
        self.append(difference(path, a, b))

    def update_from(self, other):
        for entry in other.values():
            self.append(entry)

    def paths(self):
        return set(self.keys())

    def swapped(self):
        "Return the differences as seen when comparing in the opposite direction."
        result = DifferenceSet()
        for entry in self.values():
            result.append(entry.swapped())
        return result


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


# Tie-breaking order of ops at the same path
op_order = {
    PatchOp.ADD: 0,
    PatchOp.REMOVE: 1,
    PatchOp.REPLACE: 2,
}


class PatchEntry(_AttrDict):
    """One add/remove/replace instruction of a rendered patch."""
    pass


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path, value):
    "Create a patch entry to remove the value found at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path, value=value)

def op_replace(path, from_value, value):
    "Create a patch entry to replace from_value at path with value."
    return PatchEntry(op=PatchOp.REPLACE, path=path, fromValue=from_value, value=value)


_entry_keys = {
    PatchOp.ADD: {"op", "path", "value"},
    PatchOp.REMOVE: {"op", "path", "value"},
    PatchOp.REPLACE: {"op", "path", "value", "fromValue"},
}


def is_valid_patch(patch):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except PatchFormatError:
        return False
    return True


def validate_patch(patch):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, Mapping):
        raise PatchFormatError("Patch entry '{}' is not a mapping.".format(e))

    op = e.get("op")
    if op not in _entry_keys:
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    path = e.get("path")
    if not isinstance(path, str) or not path.startswith("/"):
        raise PatchFormatError(
            "Patch entry path must be a JSON pointer, not '{}'.".format(path))

    keys = set(e.keys())
    expected = _entry_keys[op]
    if keys != expected:
        raise PatchFormatError(
            "Patch entry for '{}' expects keys {}, got {}.".format(
                op, sorted(expected), sorted(keys)))

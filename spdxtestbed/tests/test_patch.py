# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import enum
import json

import pytest

from spdxtestbed import compare, to_patch, patch_to_json
from spdxtestbed.diff_format import (
    Absent, DifferenceSet, op_add, op_remove, op_replace,
)
from spdxtestbed.log import PatchFormatError
from spdxtestbed.model import DocumentNode, NoAssertion, NodeAdapter
from spdxtestbed.patching import to_json_value

from .utils import annotation


class Purpose(enum.Enum):
    LIBRARY = "LIBRARY"


def test_patch_empty():
    assert to_patch(DifferenceSet()) == []


def test_patch_replace_scenario():
    a = DocumentNode("SpdxDocument", name="old")
    b = DocumentNode("SpdxDocument", name="new")

    assert to_patch(compare(a, b)) == [op_replace("/name", "old", "new")]


def test_patch_remove_whole_collection_scenario():
    a = DocumentNode("SpdxDocument", name="doc",
                     annotations=[annotation("Completely new annotation!")])
    b = DocumentNode("SpdxDocument", name="doc")

    patch = to_patch(compare(a, b))

    assert len(patch) == 1
    assert patch[0].op == "remove"
    assert patch[0].path == "/annotations"
    assert patch[0].value == [{"comment": "Completely new annotation!"}]


def test_patch_add_whole_node_is_one_operation():
    pvc = DocumentNode("PackageVerificationCode",
                       packageVerificationCodeValue="abc",
                       packageVerificationCodeExcludedFiles=["./x"])
    a = DocumentNode("Package", name="p")
    b = DocumentNode("Package", name="p", packageVerificationCode=pvc)

    patch = to_patch(compare(a, b))

    assert patch == [op_add("/packageVerificationCode", {
        "packageVerificationCodeValue": "abc",
        "packageVerificationCodeExcludedFiles": ["./x"],
    })]


def test_patch_root_class_entry():
    a = DocumentNode("SpdxDocument", name="doc")
    b = DocumentNode("File", fileName="./foo")

    assert to_patch(compare(a, b)) == [op_replace("/class", "SpdxDocument", "File")]


def test_patch_folds_entries_below_one_sided_ancestor():
    differences = DifferenceSet()
    differences.add("/creationInfo", Absent, DocumentNode("CreationInfo", created="x"))
    differences.add("/creationInfo/created", Absent, "x")
    differences.add("/name", "a", "b")

    patch = to_patch(differences)

    assert patch == [
        op_add("/creationInfo", {"created": "x"}),
        op_replace("/name", "a", "b"),
    ]


def test_patch_folds_deeply_nested_entries():
    differences = DifferenceSet()
    differences.add("/packages/0/checksums/1/algorithm", "SHA1", Absent)
    differences.add("/packages/0", DocumentNode("Package", name="p"), Absent)

    assert to_patch(differences) == [op_remove("/packages/0", {"name": "p"})]


def test_patch_rejects_mixed_directions():
    differences = DifferenceSet()
    differences.add("/creationInfo", DocumentNode("CreationInfo", created="x"), Absent)
    differences.add("/creationInfo/created", "x", "y")

    with pytest.raises(PatchFormatError):
        to_patch(differences)


def test_patch_does_not_fold_into_replace():
    differences = DifferenceSet()
    differences.add("/creationInfo", "x", "y")
    differences.add("/creationInfo/created", Absent, "z")

    patch = to_patch(differences)

    assert [e.op for e in patch] == ["replace", "add"]


def test_patch_order_by_path_segments():
    differences = DifferenceSet()
    differences.add("/b", 1, 2)
    differences.add("/a/10", Absent, "ten")
    differences.add("/a/2", "two", Absent)
    differences.add("/a/b", 1, 2)

    patch = to_patch(differences)

    assert [e.path for e in patch] == ["/a/2", "/a/10", "/a/b", "/b"]
    assert [e.op for e in patch] == ["remove", "add", "replace", "replace"]


def test_patch_order_is_independent_of_insertion_order():
    paths = ["/name", "/annotations", "/files", "/creationInfo/created"]
    first = DifferenceSet()
    second = DifferenceSet()
    for p in paths:
        first.add(p, 1, 2)
    for p in reversed(paths):
        second.add(p, 1, 2)

    assert to_patch(first) == to_patch(second)


def test_to_json_value_strips_empty_properties():
    node = DocumentNode(
        "File",
        fileName="./foo",
        comment=NoAssertion,
        licenseInfoInFiles=[],
        noticeText=None,
        checksums=[DocumentNode("Checksum", algorithm="SHA1", checksumValue="abc")],
    )

    assert to_json_value(node) == {
        "fileName": "./foo",
        "checksums": [{"algorithm": "SHA1", "checksumValue": "abc"}],
    }


def test_to_json_value_scalars():
    assert to_json_value(NoAssertion) == "NOASSERTION"
    assert to_json_value(datetime.date(2022, 1, 1)) == "2022-01-01"
    assert to_json_value(datetime.datetime(2022, 1, 1, 12, 30)) == "2022-01-01T12:30:00"
    assert to_json_value(Purpose.LIBRARY) == "LIBRARY"
    assert to_json_value(("a", 1)) == ["a", 1]
    assert to_json_value({"b", "a"}) == ["a", "b"]
    assert to_json_value(3) == 3
    assert to_json_value(None) is None


def test_to_json_value_rejects_absent():
    with pytest.raises(PatchFormatError):
        to_json_value(Absent)
    with pytest.raises(PatchFormatError):
        to_json_value([1, Absent])


def test_patch_to_json():
    patch = [
        op_add("/annotations", [{"comment": "new"}]),
        op_replace("/name", "old", "new"),
    ]

    text = patch_to_json(patch)

    assert json.loads(text) == [
        {"op": "add", "path": "/annotations", "value": [{"comment": "new"}]},
        {"op": "replace", "path": "/name", "fromValue": "old", "value": "new"},
    ]
    assert patch_to_json([]) == "[]"
    assert "\n" not in patch_to_json(patch, indent=None)


def test_patch_partial_unordered_removal_keeps_collection():
    a = DocumentNode("SpdxDocument", annotations=[annotation("keep"), annotation("gone")])
    b = DocumentNode("SpdxDocument", annotations=[annotation("keep")])

    assert to_patch(compare(a, b)) == [
        op_remove("/annotations/*", [{"comment": "gone"}]),
    ]
    assert to_patch(compare(b, a)) == [
        op_add("/annotations/*", [{"comment": "gone"}]),
    ]


def test_patch_unordered_changes_are_never_replaced():
    a = DocumentNode("SpdxDocument", annotations=[annotation("keep"), annotation("old")])
    b = DocumentNode("SpdxDocument", annotations=[annotation("new"), annotation("keep")])

    assert to_patch(compare(a, b)) == [
        op_add("/annotations/*", [{"comment": "new"}]),
        op_remove("/annotations/*", [{"comment": "old"}]),
    ]


def test_patch_whole_subtree_leaves_out_ignored():
    a = DocumentNode("SpdxDocument", name="doc", creationInfo=DocumentNode(
        "CreationInfo", created="2022-01-01T00:00:00Z", creators=["Tool: spdx-testbed"]))
    b = DocumentNode("SpdxDocument", name="doc")

    patch = to_patch(compare(a, b, ignored_paths={"/creationInfo/created"}))

    assert patch == [op_remove("/creationInfo", {"creators": ["Tool: spdx-testbed"]})]


class SpdxDocumentModel(object):
    pass


class FileModel(object):
    pass


def test_patch_renders_class_type_ids():
    adapter = NodeAdapter()
    a = DocumentNode(SpdxDocumentModel, name="doc")
    b = DocumentNode(FileModel, fileName="./foo")

    patch = to_patch(compare(a, b, adapter=adapter))

    assert patch == [op_replace("/class", "SpdxDocumentModel", "FileModel")]
    assert json.loads(patch_to_json(patch))[0]["value"] == "FileModel"


def test_to_json_value_unknown_objects():
    class Version(object):
        def __str__(self):
            return "2.3"

    assert to_json_value(Version()) == "2.3"
    assert to_json_value(1.5) == 1.5
    assert to_json_value(True) is True

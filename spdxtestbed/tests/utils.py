# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from spdxtestbed import compare, to_patch
from spdxtestbed.diff_format import is_valid_patch
from spdxtestbed.model import DocumentNode
from spdxtestbed.spdx import load_spdx_document


FILE_SHA1 = "d6a770ba38583ed4bb4525bd96e50461655d2758"


_minimal_document = {
    "SPDXID": "SPDXRef-DOCUMENT",
    "spdxVersion": "SPDX-2.3",
    "name": "SPDX-test-doc",
    "dataLicense": "CC0-1.0",
    "documentNamespace": "https://spdx.org/spdxdocs/spdx-testbed-minimal",
    "creationInfo": {
        "creators": ["Tool: spdx-testbed"],
        "created": "2022-01-01T00:00:00Z",
    },
    "files": [
        {
            "SPDXID": "SPDXRef-file",
            "fileName": "./foo.txt",
            "licenseConcluded": "LGPL-3.0-only",
            "licenseInfoInFiles": [],
            "copyrightText": "Copyright 2022 Anonymous Developer",
            "checksums": [
                {"algorithm": "SHA1", "checksumValue": FILE_SHA1},
            ],
        },
    ],
    "documentDescribes": ["SPDXRef-file"],
}


def minimal_document_data():
    "A fresh copy of the json data of a minimal document describing one file."
    return copy.deepcopy(_minimal_document)


def minimal_document():
    return load_spdx_document(minimal_document_data())


def annotation(comment, **props):
    return DocumentNode("Annotation", comment=comment, **props)


def snippet(spdx_id, **props):
    return DocumentNode("Snippet", SPDXID=spdx_id, **props)


def check_reflexive(x, **kwargs):
    "Check that a document compares equal to itself and to a copy of itself."
    assert compare(x, x, **kwargs) == {}
    assert compare(x, copy.deepcopy(x), **kwargs) == {}


def check_symmetric(x, y, **kwargs):
    "Check that comparing in both directions reports the same paths, swapped."
    xy = compare(x, y, **kwargs)
    yx = compare(y, x, **kwargs)
    assert xy.paths() == yx.paths()
    for path, e in xy.items():
        assert yx[path].a == e.b
        assert yx[path].b == e.a
    return xy


def check_compare_and_patch(x, y, **kwargs):
    "Check that the differences of x and y render as a well formed patch."
    p = to_patch(compare(x, y, **kwargs))
    assert is_valid_patch(p)
    return p

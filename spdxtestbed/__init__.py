# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diff_format import Absent, DifferenceEntry, DifferenceSet, PatchOp
from .diffing import compare, CompareConfig
from .model import DocumentNode, NoAssertion, NodeAdapter, DocumentModelAdapter
from .patching import to_patch, patch_to_json
from .spdx import SpdxAdapter, load_spdx_document


__all__ = [
    "__version__",
    "compare", "CompareConfig",
    "to_patch", "patch_to_json",
    "Absent", "DifferenceEntry", "DifferenceSet", "PatchOp",
    "DocumentNode", "NoAssertion", "NodeAdapter", "DocumentModelAdapter",
    "SpdxAdapter", "load_spdx_document",
    ]

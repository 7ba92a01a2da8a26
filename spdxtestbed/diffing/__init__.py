# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import CompareConfig
from .generic import compare

__all__ = ["compare", "CompareConfig"]

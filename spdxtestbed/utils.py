# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import re
import sys

from jsonpointer import JsonPointer, JsonPointerException

from .log import InvalidInput


# Marker used in place of an index for elements of unordered collections
ANONYMOUS = "*"


def split_path(path):
    "Split a JSON pointer on the form '/foo/bar' into ['foo','bar']."
    if not path or path == "/":
        return []
    if not path.startswith("/"):
        # Bare keys such as the root type marker
        return [path]
    try:
        return JsonPointer(path).parts
    except JsonPointerException as e:
        raise InvalidInput("Invalid path {!r}: {}".format(path, e))


def join_path(*args):
    """Join a path on the form ['foo','bar'] into '/foo/bar'.

    Also accepts a leading path string to extend, as in
    join_path('/foo', 'bar', 0) == '/foo/bar/0'.
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    parts = []
    for a in args:
        if isinstance(a, str) and a.startswith("/"):
            parts.extend(split_path(a))
        elif a not in ("", None):
            parts.append(str(a))
    return JsonPointer.from_parts(parts).path


r_is_int = re.compile(r"^[-+]?\d+$")

def star_path(path):
    """Replace integers and integer-strings in a path with * """
    path = list(path)
    for i, p in enumerate(path):
        if isinstance(p, int) or r_is_int.match(p):
            path[i] = ANONYMOUS
    return join_path(path)


def path_sort_key(path):
    """Sort key ordering paths segment by segment, integer segments numerically."""
    key = []
    for p in split_path(path):
        if r_is_int.match(p):
            key.append((0, int(p), ""))
        else:
            key.append((1, 0, p))
    return tuple(key)


def read_document(f):
    """Read an SPDX JSON document and return it as a typed DocumentNode tree.

    Parameters:
        f:  The filename to read from.
            Alternatively a file-like object can be passed.
    """
    from .spdx import load_spdx_document

    try:
        if isinstance(f, str):
            with io.open(f, encoding="utf-8") as fo:
                data = json.load(fo)
        else:
            data = json.load(f)
    except ValueError as e:
        raise InvalidInput("Could not parse SPDX JSON: {}".format(e))
    if not isinstance(data, dict):
        raise InvalidInput(
            "An SPDX document must be a JSON object, got {}".format(type(data).__name__))
    return load_spdx_document(data)


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()

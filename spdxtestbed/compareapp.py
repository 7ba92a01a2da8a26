# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

from . import log
from .args import (
    add_generic_args, add_compare_args, add_filename_args,
    add_prettyprint_args, prettyprint_config_from_args, ConfigBackedParser,
)
from .diffing import compare
from .log import ComparisonError
from .patching import patch_to_json, to_patch
from .prettyprint import pretty_print_patch
from .utils import read_document, setup_std_streams


_description = ("Compare a candidate SPDX document against a reference document "
                "and report their semantic differences.")


def main_compare(args):
    """Main handler of compare CLI"""
    expected = args.expected
    actual = args.actual
    output = getattr(args, 'out', None)

    for fn in (expected, actual):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_document(expected)
        b = read_document(actual)
        differences = compare(
            a, b,
            deep=args.deep,
            ignored_paths=args.ignore or (),
            strict=args.strict)
        patch = to_patch(differences)
    except ComparisonError as e:
        log.error("Could not compare %s and %s: %s", expected, actual, e)
        return 2

    if output:
        with io.open(output, "w", encoding="utf8") as f:
            f.write(patch_to_json(patch))
            f.write("\n")
    elif args.output_format == 'json':
        print(patch_to_json(patch))
    else:
        # Some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_patch(expected, actual, patch, config)

    return 1 if patch else 0


def _build_arg_parser(prog='spdx-compare'):
    """Creates an argument parser for the spdx-compare command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_compare_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["expected", "actual"])

    parser.add_argument(
        '-o', '--out',
        default=None,
        help="if supplied, the patch is written to this file as JSON. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_compare(arguments)


if __name__ == "__main__":
    sys.exit(main())

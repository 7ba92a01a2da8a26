# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import json
import sys

import colorama

from .diff_format import PatchOp
from .log import PatchFormatError


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format a json value as lines of text."
    if isinstance(v, (dict, list)):
        return json.dumps(v, indent=2, sort_keys=True).splitlines()
    return [json.dumps(v)]


def pretty_print_value(value, prefix, config=DefaultConfig):
    for line in format_value(value):
        config.out.write("%s%s%s%s\n" % (prefix, IND, line, config.RESET))


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_patch_entry(e, config=DefaultConfig):
    if e.op == PatchOp.ADD:
        pretty_print_diff_action("added", e.path, config)
        pretty_print_value(e.value, config.ADD, config)
    elif e.op == PatchOp.REMOVE:
        pretty_print_diff_action("removed", e.path, config)
        pretty_print_value(e.value, config.REMOVE, config)
    elif e.op == PatchOp.REPLACE:
        pretty_print_diff_action("replaced", e.path, config)
        pretty_print_value(e.fromValue, config.REMOVE, config)
        pretty_print_value(e.value, config.ADD, config)
    else:
        raise PatchFormatError("Unknown patch op {}".format(e.op))


def pretty_print_patch(afn, bfn, patch, config=DefaultConfig):
    """Print a patch between two documents in a readable form.

    afn and bfn name the documents in the header.
    """
    if not patch:
        config.out.write("%sdocuments %s and %s are equivalent%s\n" % (
            config.INFO, afn, bfn, config.RESET))
        return
    config.out.write("%s--- %s%s\n" % (config.REMOVE, afn, config.RESET))
    config.out.write("%s+++ %s%s\n" % (config.ADD, bfn, config.RESET))
    for e in patch:
        pretty_print_patch_entry(e, config)


def pretty_print_dict(d, config=DefaultConfig):
    """Print a flat or nested dict of settings, one key per line."""
    for key in sorted(d):
        value = d[key]
        if isinstance(value, dict):
            config.out.write("%s:\n" % (key,))
            for line in format_value(value):
                config.out.write("%s%s\n" % (IND, line))
        else:
            config.out.write("%s: %s\n" % (key, value))

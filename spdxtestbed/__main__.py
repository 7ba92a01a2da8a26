# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["compare"]
HELP_MESSAGE_VERBOSE = ("Usage: spdxtestbed [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, COMMANDS{%s}\n\n"
                       "Examples: spdxtestbed --version\n"
                       "          spdxtestbed compare -h\n"
                       "          spdxtestbed compare expected.json actual.json "
                       "--ignore /creationInfo\n" % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Please specify command to run, one of %r.\n\n%s" % (
            COMMANDS, HELP_MESSAGE_VERBOSE))

    cmd = args[0]
    args = args[1:]

    if cmd == "compare":
        from .compareapp import main
    elif cmd in ("--version", "-V"):
        print(__version__)
        return 0
    elif cmd in ("-h", "--help"):
        print(HELP_MESSAGE_VERBOSE)
        return 0
    else:
        sys.exit("Unrecognized command '%s', should be one of %r.\n\n%s" % (
            cmd, COMMANDS, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    sys.exit(main_dispatch())

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class ComparisonError(ValueError):
    """Base class for all failures surfaced by the comparison engine."""
    pass


class InvalidInput(ComparisonError):
    pass


class UnknownIgnoredProperty(ComparisonError):
    """Raised in strict mode when an ignore rule names no known property."""

    def __init__(self, rules):
        self.rules = sorted(rules)
        super(UnknownIgnoredProperty, self).__init__(
            "Ignore rules do not match any known property: {}".format(
                ", ".join(self.rules)))


class StructuralCycle(ComparisonError):

    def __init__(self, path):
        self.path = path
        super(StructuralCycle, self).__init__(
            "Cycle detected while comparing documents at '{}'".format(path or "/"))


class PatchFormatError(ComparisonError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for spdxtestbed entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all spdxtestbed loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_log_level(level, set_main=True):
    """Set a log level for spdxtestbed loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('spdxtestbed')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical

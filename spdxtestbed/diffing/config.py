# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..utils import join_path, split_path, star_path


class CompareConfig:
    """Adapter, ignore rules and strictness to pass around during a comparison.

    Ignore rules starting with '/' are paths from the document root, where
    '*' matches any index or the anonymous element marker. Rules without a
    leading '/' are property names ignored at every depth.
    """

    def __init__(self, *, adapter=None, ignored_paths=(), strict=False):
        if adapter is None:
            from ..spdx import SpdxAdapter
            adapter = SpdxAdapter()
        if isinstance(ignored_paths, str):
            ignored_paths = [ignored_paths]

        self.adapter = adapter
        self.strict = strict
        self.ignored_paths = frozenset(ignored_paths)

        self._absolute_rules = {}
        self._name_rules = set()
        for rule in self.ignored_paths:
            if rule.startswith("/"):
                self._absolute_rules[join_path(split_path(rule))] = rule
            else:
                self._name_rules.add(rule)

    def ignore_rule(self, path, name):
        """Return the rule ignoring property name at path, or None."""
        if name in self._name_rules:
            return name
        rule = self._absolute_rules.get(path)
        if rule is None:
            rule = self._absolute_rules.get(star_path(split_path(path)))
        return rule

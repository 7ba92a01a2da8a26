#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

SPDXTESTBED_PATH = HERE / "spdxtestbed"


def get_version(path):
    with open(path) as f:
        text = f.read()
    match = re.search(r'^__version__ = ["\']([^"\']+)["\']', text, re.M)
    return match.group(1)


VERSION = get_version(SPDXTESTBED_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='spdx-testbed',
      version=VERSION,
      description='Semantic comparison of SPDX documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.7',
      packages=find_packages(),
      package_data={
          'spdxtestbed': ['*.schema.json'],
          'spdxtestbed.tests': ['files/*.json'],
      },
      install_requires=[
          'colorama',
          'jsonpointer',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'spdx-compare = spdxtestbed.compareapp:main',
              'spdxtestbed = spdxtestbed.__main__:main_dispatch',
          ],
      },
      )

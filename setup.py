#!/usr/bin/env python

# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Setuptools installer for ittychat.
"""

import pathlib
import re

import setuptools

setuptools.setup(
    name="ittychat",
    version=re.search(
        r'^__version__ = "([^"]+)"',
        pathlib.Path("src/ittychat/__init__.py").read_text(encoding="utf8"),
        flags=re.M,
    ).group(1),
    description="A (very!) simple line-oriented TCP chat server.",
    long_description=pathlib.Path("README.rst").read_text(encoding="utf8"),
    long_description_content_type="text/x-rst",
    license="MIT",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    install_requires=[
        "Twisted>=22.10.0",
        "zope.interface>=5",
    ],
    entry_points={
        "console_scripts": ["ittychat = ittychat.scripts.ittychat:run"],
    },
    classifiers=[
        "Framework :: Twisted",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Communications :: Chat",
    ],
)

#!/usr/bin/env python

# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Setuptools installer for txresolve.
"""

import pathlib

import setuptools

setuptools.setup(
    name="txresolve",
    version="1.0.0",
    description="Chained, Deferred-based DNS resolution with hosts(5) support.",
    long_description=pathlib.Path("README.rst").read_text(encoding="utf8"),
    long_description_content_type="text/x-rst",
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: Twisted",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    install_requires=[
        "Twisted >= 21.2.0",
        "zope.interface >= 5.0",
        "attrs >= 21.3.0",
        "constantly >= 15.1",
        "incremental >= 21.3.0",
    ],
    entry_points={
        "console_scripts": [
            "txresolve-lookup = txresolve.scripts.lookup:run",
        ],
    },
)

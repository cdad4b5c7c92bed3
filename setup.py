# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from setuptools import setup, find_packages
import version

REQUIRES = [
    "requests >= 2.22.0",
]

setup(
    author="speller authors",
    entry_points={
        "console_scripts": [
            "speller = speller.cli:main",
        ],
    },
    install_requires=REQUIRES,
    extras_require={
        "test": ["pytest"],
        "completion": ["argcomplete"],
    },
    license="Apache 2.0",
    name="trie-speller",
    packages=find_packages(exclude=["tests"]),
    platforms=["POSIX", "MacOS", "Windows"],
    description="Trie backed spell checker with Damerau-Levenshtein suggestions",
    long_description=open("README.rst").read(),
    python_requires=">=3.8",
    version=version.get_project_version("speller/version.py"),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)

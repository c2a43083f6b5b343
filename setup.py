#!/usr/bin/env python3

from setuptools import setup

# this defines __version__ for use below without assuming governor is in the
# path or importable during build
with open("governor/version.py", "r") as version:
    code = compile(version.read(), "governor/version.py", "exec")
    exec(code)

# Installation requirements.
with open("requirements.txt") as requirements:
    required = requirements.read().splitlines()

# Test suite requirements.
with open("requirements-dev.txt") as requirements:
    test_required = requirements.read().splitlines()

kwargs = {
    "name": "governor",
    "version": __version__,  # type: ignore[name-defined]  # noqa: F821
    "packages": [
        "governor",
        "governor.ctl",
        "governor.entities",
        "governor.models",
        "governor.models.base",
        "governor.repositories",
        "governor.services",
        "governor.usecases",
    ],
    "scripts": ["bin/governor-ctl"],
    "description": "Nested group membership enumeration engine.",
    "long_description": open("README.rst").read(),
    "license": "Apache",
    "install_requires": required,
    "tests_require": test_required,
    "extras_require": {"test": test_required},
    "classifiers": [
        "Programming Language :: Python :: 3",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
}

setup(**kwargs)

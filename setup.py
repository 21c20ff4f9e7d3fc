#!/usr/bin/env python3
from setuptools import setup

import nftsim

config = {
    "description": "nftsim: in-memory nftables backend for unit tests",
    "author": nftsim.__author__,
    "author_email": nftsim.__email__,
    "version": nftsim.__version__,
    "install_requires": [],
    "extras_require": {
        "test": ["coverage", "pytest", "pytest-cov"],
    },
    "python_requires": ">=3.8",
    "packages": ["nftsim", "nftsim.backends"],
    "name": "nftsim",
}

setup(**config)

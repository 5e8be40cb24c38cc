#!/usr/bin/env python
from setuptools import setup, find_namespace_packages

setup(
    name="sniax",
    version="1.0.0",
    description="Subdomain enumeration via AXFR, CNAME chaining and SNI probing",
    author="SNIAX Team",
    packages=find_namespace_packages(include=["sniax", "sniax.*"]),
    install_requires=[
        "dnspython",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "sniax=sniax.cli:main",
        ],
    },
    python_requires=">=3.9",
)

"""
Setup script for rns-numbers.

To install:
    pip install .

To install in development mode (with test dependencies):
    pip install -e ".[dev]"

To build wheel:
    pip wheel . --no-deps
"""

import os

from setuptools import setup, find_packages

setup(
    name="rns-numbers",
    version="0.3.0",
    author="VesterlundCoder",
    author_email="",
    description="Mixed-radix, base-q and residue-number-system integer encodings",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["rns_numbers", "rns_numbers.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "gmpy2>=2.1",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "sympy>=1.9",
            "mpmath>=1.2",
        ],
        "sympy": [
            "sympy>=1.9",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords="rns residue-number-system crt mixed-radix modular-arithmetic",
)

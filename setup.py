# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
tracetool Python Package Setup Configuration
"""

from setuptools import find_packages, setup

setup(
    name="tracetool",
    version="0.1.0",
    description="Summarize and filter Chrome trace files by process",
    author="tracetool Contributors",
    license="BSD-3-Clause",
    packages=find_packages(include=["tracetool", "tracetool.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0.0",
        "jsonschema>=4.0.0",
        "tabulate>=0.9.0",
        "zstandard>=0.18.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "mypy>=1.0.0",
            "black>=22.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tracetool=tracetool.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)

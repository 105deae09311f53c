#!/usr/bin/env python3
"""
Setup script for the NetBurst configuration package.
"""

from setuptools import setup, find_packages

# Read version from package
version = {}
with open("netburst/__init__.py") as f:
    for line in f:
        if line.startswith("__") and "=" in line and not line.startswith("__all__"):
            exec(line, version)

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="netburst",
    version=version["__version__"],
    author=version["__author__"],
    description=version["__description__"],
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["netburst", "netburst.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "netburst=netburst.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Benchmark",
        "Topic :: System :: Networking",
    ],
    keywords="rdma benchmark network configuration cli",
)

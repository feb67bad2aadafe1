#!/usr/bin/env python
"""
MyShell - interactive menu shell for everyday Linux administration
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Define required packages
required_packages = [
    "psutil>=5.9.0",    # For process lookup by name
    "rich>=13.5.0",     # For rich terminal output
    "pyyaml>=6.0",      # For configuration file support
]

setup(
    name="myshell",
    version="4.0.0",
    description="Interactive menu shell wrapping common Linux file, package, power and process operations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=required_packages,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "myshell=myshell.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)

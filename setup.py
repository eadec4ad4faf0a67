#!/usr/bin/env python3

from setuptools import setup, find_packages
import os


# Read version from __init__.py (single source of truth)
def get_version():
    here = os.path.abspath(os.path.dirname(__file__))
    version_file = os.path.join(here, "switchargs", "__init__.py")

    with open(version_file, encoding="utf-8") as f:
        for line in f:
            if line.startswith("__version__"):
                # Extract version from line like: __version__ = "1.0.0"
                return line.split('"')[1]

    raise RuntimeError("Unable to find version string in __init__.py")


# Read long description from README
def read_long_description():
    here = os.path.abspath(os.path.dirname(__file__))
    try:
        with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Command line switch parsing and validation - switchargs"


setup(
    name="switchargs",
    version=get_version(),
    description="Command line switch parsing and validation",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    # License
    license="GPL-3.0",
    # Package discovery
    packages=find_packages(exclude=["tests", "tests.*"]),
    # Python version requirement
    python_requires=">=3.7",
    # No runtime dependencies, standard library only
    install_requires=[],
    # Optional dependencies (extras)
    extras_require={
        # Development
        "dev": [
            "pytest>=6.0",
            "flake8>=3.8",
            "black>=21.0",
            "mypy>=0.910",
            "build>=0.7.0",  # Package building
            "twine>=3.4.0",  # PyPI publishing
        ],
        # Tests only
        "test": [
            "pytest>=6.0",
            "pytest-cov>=2.10",
        ],
    },
    # PyPI classifiers
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    # Keywords for PyPI search
    keywords="command line arguments switches options parser validation",
    # Zip safe
    zip_safe=False,
)

#!/usr/bin/env python3
"""
Setup script for causal-cmd - command-line option schema for causal discovery.

This package defines the command-line options of a causal discovery launcher:
built-in flags merged with one flag per algorithm parameter, with the views
used for parsing, help and validation.
"""

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "causal-cmd - command-line option schema for causal discovery"

setup(
    name="causal-cmd",
    version="1.0.0",
    author="causal-cmd Development Team",
    author_email="causal-cmd-dev@example.com",
    description="Command-line option schema for a causal discovery launcher",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests*', 'docs*']),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Information Analysis",
        "License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26.3",
        "PyYAML>=6.0.1",
    ],
    extras_require={
        "dev": [
            "pytest>=8.3.4",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "causal-cmd=causal_cmd.cli.run_cmd:run_cmd_main",
        ],
    },
    package_data={
        "causal_cmd": [
            "catalogs/data/*.yaml",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="causal discovery, command line, option schema, tetrad",
)

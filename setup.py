#!/usr/bin/env python3
"""Setup script for shrek-deck-tools package."""

from setuptools import setup, find_packages

setup(
    name="shrek-deck-tools",
    version="0.1.0",
    description="Deck list to Tabletop Simulator saved object converter",
    author="Shrek Deck Project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0.0",
        "Pillow>=10.0.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "shrekdeck=shrekdeck.cli:cli",
        ],
    },
    python_requires=">=3.10",
)

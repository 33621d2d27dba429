#!/usr/bin/env python3
"""Setup script for research_summary package.
"""

from setuptools import find_packages, setup

setup(
    name="research_summary",
    version="0.1.0",
    description="Daily research summary dashboard with filtering and JSON export",
    author="Research Summary Team",
    packages=find_packages(include=["src*", "app*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=1.5.0",
        "streamlit>=1.30.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "numpy>=1.23.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pandas-stubs>=2.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "research-summary=src.cli:main",
        ],
    },
)

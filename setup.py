# -*- coding: utf-8 -*-
"""Setup module for daisie."""
from setuptools import setup, find_packages


with open("README.md", encoding="utf-8") as f:
    readme = f.read()

setup(
    name="daisie",
    version="1.0",
    description="Transform the DAISIE alien species inventory into a Darwin Core checklist",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="Specify Systems Team",
    author_email="aimee.stewart@ku.edu",
    packages=find_packages(exclude=("tests", "docs")),
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "daisie_checklist=daisie.tools.build_checklist:cli",
        ],
    },
)

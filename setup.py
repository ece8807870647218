"""Build configuration for cons_cell."""

from setuptools import setup

setup(
    name="cons-cell",
    version="0.1.0",
    py_modules=["cons_cell"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
)

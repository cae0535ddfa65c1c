# setup.py
from setuptools import setup, find_packages

setup(
    name="seed_alias",
    version="0.1.0",
    description="Generate short arithmetic aliases for integers from a fixed digit seed",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "seed-alias = seed_alias.cli:main",
        ],
    },
)

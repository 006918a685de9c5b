# setup.py
from setuptools import setup, find_packages

setup(
    name="simplex_roots",
    version="0.1.0",
    description="Derivative-free orthant-bisection root finding for vector functions",
    packages=find_packages(include=["simplex_roots", "simplex_roots.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "sympy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "simplex-roots = simplex_roots.cli:main",
        ],
    },
)

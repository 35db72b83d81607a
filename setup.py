"""
LaTeX Solver - Setup
"""

from setuptools import setup, find_packages

setup(
    name="latex_solver",
    version="0.1.0",
    description="LaTeX-flavoured expression parser, simplifier and equation solver",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "verify": ["sympy"],
        "test": ["pytest", "sympy"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
    ],
)

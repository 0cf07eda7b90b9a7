"""
setup.py

Установка Golf Tee Solver.

Использование:
    pip install -e .            # движок, CLI и веб-API
    pip install -e ".[test]"    # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="golf_tee_solver",
    version="1.0.0",
    description="Golf Tee (15-hole triangle) peg solitaire solver",
    packages=find_packages(include=["core", "solvers", "tee_io", "utils", "web"]),
    py_modules=["config", "main"],
    python_requires=">=3.10",
    install_requires=[
        "flask>=2.2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "golf-tee=main:main",
        ],
    },
    zip_safe=False,
)

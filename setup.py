# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa-lisp",
    version="0.1.0",
    description="A small lexically scoped Lisp interpreter with an arena of environment frames",
    packages=find_packages(include=["kappa", "kappa.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": ["kappa = kappa.__main__:main"],
    },
    zip_safe=False,
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="blisp",
    version="0.1.0",
    description="A small Lisp with S-Expressions, Q-Expressions and closures, evaluated by a tree-walking interpreter",
    packages=find_packages(include=["blisp", "blisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

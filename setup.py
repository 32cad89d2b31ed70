# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.1.0",
    description="An in-process evaluator for a small Clojure-flavoured Lisp",
    packages=find_packages(include=["kappa", "kappa.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyrsistent>=0.19",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    zip_safe=False,
)

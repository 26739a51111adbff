# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="cella",
    version="0.1.0",
    description="A minimal tagged-value LISP evaluator with arena-backed heaps",
    packages=find_namespace_packages(include=["cella", "cella.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

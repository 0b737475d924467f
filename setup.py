# setup.py
from setuptools import setup, find_packages

setup(
    name="callisp",
    version="0.1.0",
    description="A small Lisp dialect interpreter with an embeddable evaluator and a line-based REPL",
    packages=find_packages(include=["callisp", "callisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["callisp = callisp.cmdline:main"],
    },
    zip_safe=False,
)

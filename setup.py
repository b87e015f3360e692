# setup.py
from setuptools import setup, find_packages

setup(
    name="urlisp",
    version="0.1.0",
    description="A small McCarthy-style Lisp: lexer, parser, fexpr-capable evaluator and self-hosted eval",
    packages=find_packages(include=["urlisp", "urlisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["urlisp=urlisp.__main__:main"],
    },
    zip_safe=False,
)

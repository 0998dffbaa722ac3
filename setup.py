# setup.py
from setuptools import setup, find_packages

setup(
    name="blisp",
    version="0.0.0.0.1",
    description="Lispy: a small S-expression interpreter with quoted lists",
    packages=find_packages(include=["blisp", "blisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["blisp = blisp.repl:main"],
    },
    zip_safe=False,
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="mal",
    version="0.1.0",
    description="A small Lisp interpreter with a trampolining evaluator",
    python_requires=">=3.10",
    packages=find_packages(include=["mal", "mal.*"]),
    package_data={"mal": ["prelude/*.mal"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mal = mal.repl:main"],
    },
    zip_safe=False,
)

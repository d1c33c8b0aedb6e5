# setup.py
from setuptools import setup, find_packages

setup(
    name="lispeval",
    version="0.1.0",
    description="Tree-walking evaluator for a small Lisp",
    packages=find_packages(include=["lispeval", "lispeval.*"]),
    package_data={"lispeval": ["prelude/*.lisp"]},
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="duo",
    version="0.1.0",
    description="Duo: a small prototype-based, message-passing language interpreter",
    packages=find_packages(include=["duo", "duo.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

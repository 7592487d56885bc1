# setup.py
from setuptools import setup, find_packages

setup(
    name="varcore",
    version="0.1.0",
    description="Dynamically-typed scalar values and operators for a small scripting runtime",
    packages=find_packages(include=["varcore", "varcore.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="hcons",
    version="0.1.0",
    description="Hash-consing tables with reference-counted handles",
    packages=find_packages(include=["hcons", "hcons.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

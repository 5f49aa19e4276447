"""Setup script for Warshall."""
from setuptools import setup, find_packages

setup(
    name="warshall",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["cli"],
    install_requires=[
        "flask",
        "pydantic",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["warshall=cli:main"],
    },
    python_requires=">=3.10",
)

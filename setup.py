"""Setup script for ccfilter."""

from setuptools import find_packages, setup

setup(
    name="ccfilter",
    version="0.1.0",
    description="Compiler invocation filter for build observation tools",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "tomli>=1.1.0; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)

"""Setup configuration for cavy."""

from setuptools import setup, find_packages

setup(
    name="cavy",
    version="0.1.0",
    description="Sequential in-process test runner with cavy-cli reporting",
    packages=find_packages(include=["cavy", "cavy.*"]),
    python_requires=">=3.11",
    install_requires=[
        "requests>=2.31.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
)

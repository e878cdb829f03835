"""Setup script for the Solana Gateway."""

import os
from setuptools import setup, find_packages

# Get description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Get version from package
about = {}
with open(os.path.join("solana_gateway", "__init__.py"), "r", encoding="utf-8") as f:
    exec(f.read(), about)


def read_requirements(path):
    """Read a requirements file, skipping comments and blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


setup(
    name="solana-gateway",
    version=about["__version__"],
    description="REST gateway for Solana balances, keypairs, SPL token instructions and message signing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__email__"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "test": read_requirements("requirements-test.txt"),
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Framework :: FastAPI",
        "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    ],
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "solana-gateway=solana_gateway.app:main",
        ],
    },
)

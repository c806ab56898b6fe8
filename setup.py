#!/usr/bin/env python3
"""
Setup script for aptly-tool package.
"""

from setuptools import setup, find_packages
import os


# Read the README file for long description
def read_readme():
    """Read the README file."""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "Aptly Tool - Publish Debian packages to aptly-managed apt repositories"


setup(
    name="aptly-tool",
    version="1.0.0",
    author="Platform Engineering Team",
    author_email="platform-engineering@example.com",
    description="Upload, snapshot and publish Debian packages through the aptly REST API",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Archiving :: Packaging",
        "Topic :: System :: Software Distribution",
    ],
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.24.0",
        "pydantic>=2.0.0",
        "click>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "pytest-mock>=3.6",
            "respx>=0.20.0",
            "diff-cover>=7.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.800",
            "pylint>=2.8",
            "pre-commit>=3.0.0",
            "setuptools>=45",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "aptly-tool=aptly_tool.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)

"""
Setup configuration for the flask-rest-plugin package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="flask-rest-plugin",
    version="0.1.0",
    author="flask-rest-plugin Contributors",
    author_email="contributors@flask-rest-plugin.example.com",
    description="REST conventions for Flask: format-suffix serialization, resource routes and status helpers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/flask-rest-plugin",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Framework :: Flask",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=6.0",
            "pytest-cov",
            "requests>=2.25.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "requests>=2.25.0",
            "ruff",
            "mypy",
            "types-PyYAML",
        ],
    },
    project_urls={
        "Bug Reports": "https://github.com/yourusername/flask-rest-plugin/issues",
        "Source": "https://github.com/yourusername/flask-rest-plugin",
    },
)

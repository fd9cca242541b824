#!/usr/bin/env python3
"""
Setup script for the cf DNS command-line tool.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="cf-dns",
    version="1.0.0",
    author="cf-dns developers",
    author_email="cf-dns@example.com",
    description="View and modify Cloudflare DNS records from the command line",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/cf-dns",
    packages=find_packages(include=["cf_dns", "cf_dns.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: System :: Systems Administration",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0", "behave>=1.2.6"],
    },
    entry_points={
        "console_scripts": [
            "cf=cf_dns.cli.main:main",
        ],
    },
    include_package_data=True,
)

#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="siteindex",
    version="0.1",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "jinja2",
        "PyYAML",
        "pykwalify",
        "pyuca",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["siteindex = siteindex.main:main"],
    },
    package_data={"siteindex": ["schema.yml", "templates/*"]}
)

# Copyright 2012-2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Setuptools installer for dockernet."""

from setuptools import find_packages, setup

setup(
    name="dockernet",
    version="0.1.0",
    license="AGPLv3",
    description="Docker networks backed by NAPI networks and fabrics",
    author="dockernet Developers",
    packages=find_packages(
        where="src",
        exclude=["tests", "tests.*"],
    ),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "aiohttp<3.14",
        "netaddr",
        "pydantic>=2",
        "python-json-logger<4",
        "PyYAML",
        "structlog",
    ],
    extras_require={
        "testing": [
            "aioresponses",
            "pytest",
            "pytest-asyncio",
            "pytest-mock",
            "yarl",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Networking",
    ],
)

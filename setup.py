#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from setuptools import find_packages, setup

setup(
    name="check-docker",
    version="1.0.0",
    description="Monitoring plug-in checking the health of a Docker daemon",
    license="GPL-2.0-only",
    packages=find_packages(include=["check_docker", "check_docker.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["requests>=2.28", "pydantic>=2.0", "vcrpy>=4.2"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["check_docker = check_docker.checker:main_cli"]},
)

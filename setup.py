#!/usr/bin/env python3

from setuptools import find_packages, setup

from boshci import __version__

setup(
    name="boshci",
    description="bosh deployment CI driver",
    long_description="Command-line driver that targets a bosh director, "
    + "patches, deploys, verifies and cleans up deployments in CI.",
    version=str(__version__),
    install_requires=["ruamel.yaml>=0.17"],
    include_package_data=True,
    extras_require={"test": ["pytest"]},
    license="License :: Other/Proprietary License",
    platforms=["Linux"],
    keywords=["bosh", "deployment", "CI"],
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    python_requires=">=3.10",
    entry_points={"console_scripts": ["boshci = boshci.main:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
    ],
)

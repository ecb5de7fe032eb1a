from __future__ import annotations

import os

from setuptools import find_packages, setup

dependencies = [
    "click==8.1.7",  # For the CLI
    "colorlog==6.8.2",  # Adds color to logs
    "concurrent-log-handler==0.9.25",  # Concurrently log and rotate logs
    "filelock==3.13.1",  # For reading and writing config multiprocess and multithread safely  (non-reentrant locks)
    "importlib-resources==6.1.1",  # Reads the packaged initial config
    "PyYAML==6.0.1",  # Used for config file format
    "typing-extensions==4.10.0",  # typing backports like final
]

dev_dependencies = [
    "build==1.0.3",
    "coverage==7.4.1",
    "pytest==8.0.2",
    "pytest-cov==4.1.0",
    "isort==5.13.2",
    "flake8==7.0.0",
    "mypy==1.8.0",
    "black==23.12.1",
    "types-pyyaml==6.0.12.12",
    "types-setuptools==69.1.0.20240217",
]

kwargs = dict(
    name="etherutils",
    version="0.1.0",
    description="Exact conversion between Wei and human readable Ether amounts.",
    license="Apache License",
    python_requires=">=3.9, <4",
    keywords="ethereum ether wei units",
    install_requires=dependencies,
    extras_require=dict(
        dev=dev_dependencies,
    ),
    packages=find_packages(include=["etherutils", "etherutils.*"]),
    entry_points={
        "console_scripts": [
            "etherutils = etherutils.cmds.etherutils:main",
        ]
    },
    package_data={
        "": ["py.typed"],
        "etherutils.util": ["initial-*.yaml"],
    },
    zip_safe=False,
)

if len(os.environ.get("ETHERUTILS_SKIP_SETUP", "")) < 1:
    setup(**kwargs)  # type: ignore

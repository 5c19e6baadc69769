import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="ethereum-tx-classifier",
    version="0.1.0",
    description="Detect the envelope type of Ethereum transactions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.10",
    packages=setuptools.find_packages(
        include=[
            "cli",
            "cli.*",
            "config",
            "config.*",
            "ethereum_tx_base_types",
            "ethereum_tx_base_types.*",
            "ethereum_tx_classifier",
            "ethereum_tx_classifier.*",
            "ethereum_tx_forks",
            "ethereum_tx_forks.*",
            "ethereum_tx_logging",
            "ethereum_tx_logging.*",
            "ethereum_tx_types",
            "ethereum_tx_types.*",
        ]
    ),
    install_requires=[
        "click>=8.1,<9",
        "pydantic>=2.10,<3",
        "PyYAML>=6.0.2,<7",
    ],
    extras_require={
        "test": [
            "pytest>=8",
        ],
    },
    entry_points={
        "console_scripts": [
            "txtype=cli.txtype:txtype",
        ],
    },
)

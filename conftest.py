"""Local pytest configuration used by the classifier's test suites."""

pytest_plugins = ["ethereum_tx_logging.plugin"]

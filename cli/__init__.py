"""Command line tools for the transaction type classifier."""

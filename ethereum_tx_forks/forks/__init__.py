"""Listings of all forks, current and upcoming."""

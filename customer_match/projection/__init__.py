"""Projection package: the final allow-list gate before transmission."""

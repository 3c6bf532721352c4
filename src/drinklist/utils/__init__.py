"""Logging utilities for DrinkList."""

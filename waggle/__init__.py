"""Waggle API."""

"""Gatekeeper - permission resolution and role protection for named resources."""

__version__ = "0.1.0"

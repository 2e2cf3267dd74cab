"""Singly linked list algorithms with helpers for digits and bracket strings."""

__version__ = "0.1.0"
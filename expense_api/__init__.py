"""Expense Tracker API: token-gated, per-user expense records over REST."""

__version__ = "0.1.0"

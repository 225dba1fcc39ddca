"""Proposal Studio - proposal document builder with a shared layout engine."""

__version__ = "1.0.0"

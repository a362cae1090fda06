"""Scripted chat engine for booking therapy appointments."""

__version__ = "0.1.0"

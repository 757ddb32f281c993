"""Headless frame driver for the spin engine."""

from .driver import SpinDriver

__all__ = ["SpinDriver"]

"""Scaffold release-it publishing into Node.js projects."""

__version__ = "1.0.0"

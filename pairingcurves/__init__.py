"""Pairing-friendly elliptic curve arithmetic in pure Python."""

__version__ = "0.1.0"
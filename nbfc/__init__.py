"""Lenient JSON reading and writing, fan threshold selection, option parsing and help texts for a notebook fan control service."""

__version__ = "0.3.18"
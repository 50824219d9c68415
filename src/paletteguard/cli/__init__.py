"""
Command line interface: ``paletteguard generate | prompt | contrast``.
"""

from paletteguard.cli.main import main

__all__ = ["main"]

"""Transcript crawler: fetch archive pages, parse dialogue, store speaker turns."""

__version__ = "0.1.0"

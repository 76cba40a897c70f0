"""Ballot counting tools and a small 2D toolkit of vectors, colours, shapes, events, transitions, sprites and maze data."""

__version__ = "0.1.0"
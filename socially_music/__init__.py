"""
Socially music service: Apple Music library and catalog access mapped
onto small Artist, Track and Playlist models.
"""

__version__ = "0.1.0"

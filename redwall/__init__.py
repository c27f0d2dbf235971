"""Fetch wallpapers from a subreddit, fit them to the screen and set them on KDE Plasma."""

__version__ = "0.1.0"
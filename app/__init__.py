"""
YouTube Summary AI.

A small gateway that forwards a YouTube URL and an instruction to a
processing backend and merges the result with the video's oEmbed metadata.
"""

from app.config import config

__version__ = config.APP_VERSION

"""Emotion detection service: face localization, cropping, classification and ranking."""

__version__ = "0.1.0"

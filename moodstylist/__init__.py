"""AI Mood Stylist: mood-driven outfit suggestions backed by a hosted AI gateway."""

__version__ = "0.1.0"

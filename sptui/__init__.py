"""Configuration, view text, key input and sign-in redirect helpers for a terminal music player client."""

__version__ = "0.25.0"

__all__ = [
    "analysis",
    "events",
    "formatting",
    "help",
    "listings",
    "playbar",
    "redirect",
    "tables",
    "user_config",
]
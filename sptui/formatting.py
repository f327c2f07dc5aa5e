"""Formatting helpers for durations, widths and highlight colours."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .user_config import Color, Theme

BASIC_VIEW_HEIGHT = 6
SMALL_TERMINAL_WIDTH = 150
SMALL_TERMINAL_HEIGHT = 45


def millis_to_minutes(millis: int) -> str:
    """Format milliseconds as ``m:ss``."""
    minutes, remainder = divmod(millis, 60000)
    seconds = remainder // 1000
    return f"{minutes}:{seconds:02d}"


def display_track_progress(progress: int, track_duration: int) -> str:
    """Format ``progress/duration (-remaining)``."""
    duration = millis_to_minutes(track_duration)
    progress_display = millis_to_minutes(progress)
    remaining = millis_to_minutes(max(track_duration - progress, 0))
    return f"{progress_display}/{duration} (-{remaining})"


def get_percentage_width(width: int, percentage: float) -> int:
    """Return ``percentage`` (0..1) of ``width`` minus a padding of 3."""
    padding = 3
    if width < padding:
        raise ValueError(f"width {width} is smaller than the padding {padding}")
    return max(0, int((width - padding) * percentage))


def get_track_progress_percentage(song_progress_ms: int, track_duration_ms: int) -> int:
    """Return track progress as a percentage clamped to 0..100."""
    if track_duration_ms <= 0:
        return 0
    track_progress = min(song_progress_ms, track_duration_ms)
    return max(0, int(track_progress / track_duration_ms * 100))


def _artist_name(artist: Any) -> str:
    if isinstance(artist, str):
        return artist
    if isinstance(artist, Mapping):
        return str(artist["name"])
    return str(artist.name)


def create_artist_string(artists: Iterable[Any]) -> str:
    """Join artist names with commas; artists may be names, mappings or objects."""
    return ", ".join(_artist_name(artist) for artist in artists)


def get_color(highlight_state: tuple[bool, bool], theme: Theme) -> Color:
    """Pick the foreground colour for an (active, hovered) state."""
    is_active, is_hovered = highlight_state
    if is_active:
        return theme.selected
    if is_hovered:
        return theme.hovered
    return theme.inactive


def get_main_layout_margin(height: int) -> int:
    """Use a margin only on terminals taller than the small-terminal threshold."""
    if height < 0:
        raise ValueError(f"terminal height cannot be negative: {height}")
    if height > SMALL_TERMINAL_HEIGHT:
        return 1
    return 0
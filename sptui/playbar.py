"""The playbar and other small screen pieces: titles, layout choices and fixed texts."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from .formatting import (
    BASIC_VIEW_HEIGHT,
    SMALL_TERMINAL_WIDTH,
    display_track_progress,
    get_track_progress_percentage,
)

DIALOG_MAX_WIDTH = 45
DIALOG_HEIGHT = 8
UNRELEASED_HEADER = "\n## [Unreleased]\n"


class RepeatState(Enum):
    """The player's repeat mode."""

    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"

    @property
    def label(self) -> str:
        """The text shown for this mode in the playbar title."""
        return _REPEAT_LABELS[self]


_REPEAT_LABELS = {
    RepeatState.OFF: "Off",
    RepeatState.TRACK: "Track",
    RepeatState.CONTEXT: "All",
}


@dataclass(frozen=True)
class PlaybarView:
    """Everything the playbar shows for the item currently playing."""

    title: str
    track_name: str
    subtitle: str
    progress_label: str
    percent: int


def playbar_title(
    is_playing: bool,
    device_name: str,
    shuffle_state: bool,
    repeat_state: RepeatState,
    volume_percent: int,
) -> str:
    """Title of the playbar block: play state, device, shuffle, repeat and volume."""
    play_title = "Playing" if is_playing else "Paused"
    shuffle_text = "On" if shuffle_state else "Off"
    return (
        f"{play_title:<7} ({device_name} | Shuffle: {shuffle_text:<3} | "
        f"Repeat: {repeat_state.label:<5} | Volume: {volume_percent:>2}%)"
    )


def track_display_name(
    name: str, item_id: str, liked_ids: Collection[str], liked_icon: str
) -> str:
    """Prefix the name with ``liked_icon`` (already padded) when the item is liked."""
    if item_id in liked_ids:
        return f"{liked_icon}{name}"
    return name


def build_playbar(
    is_playing: bool,
    device_name: str,
    shuffle_state: bool,
    repeat_state: RepeatState,
    volume_percent: int,
    name: str,
    item_id: str,
    subtitle: str,
    duration_ms: int,
    progress_ms: int,
    liked_ids: Collection[str],
    liked_icon: str,
) -> PlaybarView:
    """Assemble the playbar for a playing track or episode.

    ``subtitle`` is the artist list for a track, or "episode - show" for an episode.
    ``progress_ms`` is the pending seek position if there is one, else the song progress.
    """
    return PlaybarView(
        title=playbar_title(
            is_playing, device_name, shuffle_state, repeat_state, volume_percent
        ),
        track_name=track_display_name(name, item_id, liked_ids, liked_icon),
        subtitle=subtitle,
        progress_label=display_track_progress(progress_ms, duration_ms),
        percent=get_track_progress_percentage(progress_ms, duration_ms),
    )


def use_wide_layout(width: int, enforce_wide_search_bar: bool) -> bool:
    """Whether the terminal is wide enough for the side-by-side layout."""
    return width >= SMALL_TERMINAL_WIDTH and not enforce_wide_search_bar


def basic_view_space(height: int) -> int | None:
    """Blank lines above and below the basic-view playbar, or None if it does not fit."""
    if height < BASIC_VIEW_HEIGHT:
        return None
    return (height - BASIC_VIEW_HEIGHT) // 2


def dialog_rect(width: int, height: int) -> tuple[int, int, int, int]:
    """Place the confirmation dialog in a screen of the given size.

    Returns ``(left, top, width, height)``.
    """
    if width < 2:
        raise ValueError(f"screen width {width} is too small for a dialog")
    dialog_width = min(width - 2, DIALOG_MAX_WIDTH)
    left = (width - dialog_width) // 2
    top = height // 4
    return left, top, dialog_width, DIALOG_HEIGHT


def help_block_text(is_loading: bool, show_loading_indicator: bool) -> tuple[str, str]:
    """The theme colour name and text of the small help block."""
    if is_loading and show_loading_indicator:
        return "hint", "Loading..."
    return "inactive", "Type ?"


def error_screen_lines(api_error: str) -> list[str]:
    """The lines of the error screen for an API error message."""
    return [
        f"Api response: {api_error}",
        "If you are trying to play a track, please check that",
        " 1. You have a Spotify Premium Account",
        " 2. Your playback device is active and selected - press `d` to go to "
        "device selection menu",
        " 3. If you're using spotifyd as a playback device, your device name must "
        "not contain spaces",
        "Hint: a playback device must be either an official spotify client or a "
        "light weight alternative such as spotifyd",
        "\nPress <Esc> to return",
    ]


def clean_changelog(changelog: str, debug: bool) -> str:
    """Drop the "Unreleased" header from the changelog unless in debug mode."""
    if debug:
        return changelog
    return changelog.replace(UNRELEASED_HEADER, "")
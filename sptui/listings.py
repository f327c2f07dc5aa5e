"""Text of the list entries and titles shown in search results, artists, albums and podcasts."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Any

from .formatting import create_artist_string, millis_to_minutes

PLAYING_PREFIX = "▶ "
FULLY_PLAYED_MARK = " ✔"
UNKNOWN_ALBUM_TYPE = "unknown"
NO_DEVICES_MESSAGE = "No devices found: Make sure a device is active"
DEFAULT_EPISODES_TITLE = "Episodes"
DEFAULT_RECOMMENDATIONS_TITLE = "Recommendations"

_RECOMMENDATION_KINDS = {"song": "Song", "artist": "Artist"}


def _liked_prefix(item_id: str | None, ids: Collection[str], liked_icon: str) -> str:
    return liked_icon if item_id is not None and item_id in ids else ""


def song_line(
    name: str,
    track_id: str | None,
    artists: Iterable[Any],
    playing_id: str | None,
    liked_ids: Collection[str],
    liked_icon: str,
) -> str:
    """A song in the search results: playing mark, liked icon, name and artists.

    A missing track or playing id counts as the empty string, as the list compares them.
    """
    track_key = track_id or ""
    prefix = PLAYING_PREFIX if (playing_id or "") == track_key else ""
    liked = liked_icon if track_key in liked_ids else ""
    return f"{prefix}{liked}{name} - {create_artist_string(artists)}"


def artist_line(
    name: str, artist_id: str, followed_ids: Collection[str], liked_icon: str
) -> str:
    """An artist entry, marked with ``liked_icon`` when followed."""
    return f"{_liked_prefix(artist_id, followed_ids, liked_icon)}{name}"


def album_line(
    name: str,
    album_id: str | None,
    artists: Iterable[Any],
    album_type: str | None,
    saved_ids: Collection[str],
    liked_icon: str,
) -> str:
    """An album entry: saved icon, name, artists and album type."""
    prefix = _liked_prefix(album_id, saved_ids, liked_icon)
    kind = album_type if album_type is not None else UNKNOWN_ALBUM_TYPE
    return f"{prefix}{name} - {create_artist_string(artists)} ({kind})"


def show_line(
    name: str, show_id: str, publisher: str, saved_ids: Collection[str], liked_icon: str
) -> str:
    """A podcast entry: saved icon, name and publisher."""
    return f"{_liked_prefix(show_id, saved_ids, liked_icon)}{name} - {publisher}"


def top_track_line(name: str, track_id: str | None, playing_id: str | None) -> str:
    """An artist's top track, marked when it is the item playing."""
    if playing_id is not None and playing_id == track_id:
        return f"{PLAYING_PREFIX}{name}"
    return name


def _resume_field(resume_point: Any, name: str) -> Any:
    if isinstance(resume_point, Mapping):
        return resume_point[name]
    return getattr(resume_point, name)


def episode_columns(duration_ms: int, resume_point: Any) -> tuple[str, str]:
    """The played mark and time text of an episode.

    ``resume_point`` is None or holds ``fully_played`` and ``resume_position_ms``,
    as a mapping or as attributes.
    """
    duration = millis_to_minutes(duration_ms)
    if resume_point is None:
        return "", duration
    played = FULLY_PLAYED_MARK if _resume_field(resume_point, "fully_played") else ""
    position = millis_to_minutes(_resume_field(resume_point, "resume_position_ms"))
    return played, f"{position} / {duration}"


def recommendations_title(context: str | None, seed: str) -> str:
    """Title of the recommendations table; ``context`` is "song", "artist" or None."""
    if context is None:
        return DEFAULT_RECOMMENDATIONS_TITLE
    try:
        kind = _RECOMMENDATION_KINDS[context.lower()]
    except KeyError:
        raise ValueError(f"unknown recommendations context {context!r}") from None
    return f"Recommendations based on {kind} '{seed}'"


def album_table_title(album_name: str, artists: Iterable[Any]) -> str:
    """Title of an album's track table."""
    return f"{album_name} by {create_artist_string(artists)}"


def episode_table_title(show_name: str | None, publisher: str) -> str:
    """Title of a show's episode table, or a generic title when no show is selected."""
    if show_name is None:
        return DEFAULT_EPISODES_TITLE
    return f"{show_name} by {publisher}"


def device_lines(device_names: Iterable[str] | None) -> list[str]:
    """Entries of the device list, or a hint when no device is available."""
    names = list(device_names or ())
    return names or [NO_DEVICES_MESSAGE]
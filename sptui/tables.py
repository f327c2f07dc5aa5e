"""Table layouts: column headers and the rows shown for each kind of table."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .formatting import get_percentage_width

PLAYING_PREFIX = "▶ "
# Rows of a table's height taken by borders, header and header spacing.
TABLE_PADDING = 5


class ColumnId(Enum):
    NONE = "none"
    TITLE = "title"
    LIKED = "liked"


class TableId(Enum):
    ALBUM = "album"
    ALBUM_LIST = "album_list"
    ARTIST = "artist"
    PODCAST = "podcast"
    SONG = "song"
    RECENTLY_PLAYED = "recently_played"
    MADE_FOR_YOU = "made_for_you"
    PODCAST_EPISODES = "podcast_episodes"


_TRACK_TABLES = frozenset({TableId.SONG, TableId.RECENTLY_PLAYED, TableId.ALBUM})


@dataclass(frozen=True)
class TableHeaderItem:
    """One column of a table header."""

    text: str
    width: int
    id: ColumnId = ColumnId.NONE


@dataclass(frozen=True)
class TableHeader:
    """The kind of table and its columns."""

    id: TableId
    items: tuple[TableHeaderItem, ...]

    def get_index(self, column_id: ColumnId) -> int | None:
        """Position of the first column with ``column_id``, or None."""
        return next(
            (index for index, item in enumerate(self.items) if item.id == column_id),
            None,
        )


@dataclass(frozen=True)
class TableItem:
    """An entry to show: its identifier and the text of each column."""

    id: str
    format: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", tuple(self.format))


@dataclass(frozen=True)
class TableRow:
    """A visible row: its cells and whether it is playing or selected."""

    cells: tuple[str, ...]
    is_playing: bool = False
    is_selected: bool = False


def table_offset(height: int, selected_index: int) -> int:
    """Number of leading rows to skip so the selected row stays visible."""
    visible = height - TABLE_PADDING
    if visible < 0 or selected_index < visible:
        return 0
    return selected_index - visible


def track_playing_index(items: Sequence[TableItem], playing_id: str | None) -> int | None:
    """Index of the item that is currently playing, or None."""
    if playing_id is None:
        return None
    return next(
        (index for index, item in enumerate(items) if item.id == playing_id), None
    )


def build_rows(
    header: TableHeader,
    items: Sequence[TableItem],
    selected_index: int,
    playing_id: str | None,
    liked_ids: Collection[str],
    liked_icon: str,
    height: int,
) -> list[TableRow]:
    """Build the rows visible in a table of ``height`` lines.

    ``liked_icon`` is the text put in the liked column of liked tracks.
    """
    offset = table_offset(height, selected_index)
    playing_index = track_playing_index(items, playing_id)
    playing_offset_index = (
        playing_index - offset
        if playing_index is not None and playing_index >= offset
        else None
    )
    selected_offset_index = selected_index - offset
    title_idx = header.get_index(ColumnId.TITLE)
    liked_idx = header.get_index(ColumnId.LIKED)
    marks_playing = header.id in _TRACK_TABLES or header.id is TableId.PODCAST_EPISODES

    rows = []
    for i, item in enumerate(items[offset:]):
        cells = list(item.format)
        is_playing = False
        if marks_playing and title_idx is not None and i == playing_offset_index:
            cells[title_idx] = f"{PLAYING_PREFIX}{cells[title_idx]}"
            is_playing = True
        if header.id in _TRACK_TABLES and liked_idx is not None and item.id in liked_ids:
            cells[liked_idx] = liked_icon
        rows.append(
            TableRow(
                cells=tuple(cells),
                is_playing=is_playing,
                is_selected=i == selected_offset_index,
            )
        )
    return rows


def _narrowed(width: int, amount: int) -> int:
    if width < amount:
        raise ValueError(f"column width {width} is too small to subtract {amount}")
    return width - amount


def _header(table_id: TableId, *items: TableHeaderItem) -> TableHeader:
    return TableHeader(id=table_id, items=tuple(items))


def song_table_header(width: int) -> TableHeader:
    """Columns of the song and recommendations tables."""
    return _header(
        TableId.SONG,
        TableHeaderItem("", 2, ColumnId.LIKED),
        TableHeaderItem("Title", get_percentage_width(width, 0.3), ColumnId.TITLE),
        TableHeaderItem("Artist", get_percentage_width(width, 0.3)),
        TableHeaderItem("Album", get_percentage_width(width, 0.3)),
        TableHeaderItem("Length", get_percentage_width(width, 0.1)),
    )


def album_table_header(width: int) -> TableHeader:
    """Columns of an album's track list."""
    return _header(
        TableId.ALBUM,
        TableHeaderItem("", 2, ColumnId.LIKED),
        TableHeaderItem("#", 3),
        TableHeaderItem(
            "Title", _narrowed(get_percentage_width(width, 2.0 / 5.0), 5), ColumnId.TITLE
        ),
        TableHeaderItem("Artist", get_percentage_width(width, 2.0 / 5.0)),
        TableHeaderItem("Length", get_percentage_width(width, 1.0 / 5.0)),
    )


def recently_played_header(width: int) -> TableHeader:
    """Columns of the recently played tracks table."""
    return _header(
        TableId.RECENTLY_PLAYED,
        TableHeaderItem("", 2, ColumnId.LIKED),
        TableHeaderItem(
            "Title", _narrowed(get_percentage_width(width, 2.0 / 5.0), 2), ColumnId.TITLE
        ),
        TableHeaderItem("Artist", get_percentage_width(width, 2.0 / 5.0)),
        TableHeaderItem("Length", get_percentage_width(width, 1.0 / 5.0)),
    )


def episode_table_header(width: int) -> TableHeader:
    """Columns of a podcast's episode list."""
    return _header(
        TableId.PODCAST_EPISODES,
        # Marks an episode as fully played.
        TableHeaderItem("", 2),
        TableHeaderItem("Date", _narrowed(get_percentage_width(width, 0.5 / 5.0), 2)),
        TableHeaderItem("Name", get_percentage_width(width, 3.5 / 5.0), ColumnId.TITLE),
        TableHeaderItem("Duration", get_percentage_width(width, 1.0 / 5.0)),
    )


def album_list_header(width: int) -> TableHeader:
    """Columns of the saved albums table."""
    return _header(
        TableId.ALBUM_LIST,
        TableHeaderItem("Name", get_percentage_width(width, 2.0 / 5.0)),
        TableHeaderItem("Artists", get_percentage_width(width, 2.0 / 5.0)),
        TableHeaderItem("Release Date", get_percentage_width(width, 1.0 / 5.0)),
    )


def podcast_table_header(width: int) -> TableHeader:
    """Columns of the saved podcasts table."""
    return _header(
        TableId.PODCAST,
        TableHeaderItem("Name", get_percentage_width(width, 2.0 / 5.0)),
        TableHeaderItem("Publisher(s)", get_percentage_width(width, 2.0 / 5.0)),
    )


def artist_table_header(width: int) -> TableHeader:
    """Columns of the followed artists table."""
    return _header(
        TableId.ARTIST,
        TableHeaderItem("Artist", get_percentage_width(width, 1.0)),
    )


def made_for_you_header(width: int) -> TableHeader:
    """Columns of the made-for-you playlists table."""
    return _header(
        TableId.MADE_FOR_YOU,
        TableHeaderItem("Name", get_percentage_width(width, 2.0 / 5.0)),
    )
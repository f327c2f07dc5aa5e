import pytest

from sptui.formatting import get_percentage_width
from sptui.tables import (
    ColumnId,
    TableHeader,
    TableHeaderItem,
    TableId,
    TableItem,
    TableRow,
    album_list_header,
    album_table_header,
    artist_table_header,
    build_rows,
    episode_table_header,
    made_for_you_header,
    podcast_table_header,
    recently_played_header,
    song_table_header,
    table_offset,
    track_playing_index,
)

ICON = "♥ "


def _song_items(count):
    return [
        TableItem(f"id{n}", ("", f"song{n}", "artist", "album", "3:00"))
        for n in range(count)
    ]


def test_get_index_finds_columns():
    header = song_table_header(100)
    assert header.get_index(ColumnId.LIKED) == 0
    assert header.get_index(ColumnId.TITLE) == 1


def test_get_index_missing_column():
    assert artist_table_header(100).get_index(ColumnId.TITLE) is None


def test_table_offset_small_height_is_zero():
    assert table_offset(3, 40) == 0


def test_table_offset_selection_visible_is_zero():
    assert table_offset(20, 0) == 0
    assert table_offset(20, 14) == 0


def test_table_offset_keeps_selection_at_bottom():
    height = 12
    for selected in range(height - 5, 60):
        assert selected - table_offset(height, selected) == height - 5


def test_track_playing_index():
    items = _song_items(4)
    assert track_playing_index(items, "id2") == 2
    assert track_playing_index(items, "other") is None
    assert track_playing_index(items, None) is None


def test_build_rows_marks_playing_liked_and_selected():
    items = _song_items(3)
    rows = build_rows(
        song_table_header(100), items, 2, "id1", {"id0"}, ICON, 30
    )
    assert len(rows) == 3
    assert rows[0].cells[0] == ICON
    assert rows[1].cells[1] == "▶ song1"
    assert rows[1].is_playing and not rows[1].is_selected
    assert rows[2].is_selected and not rows[2].is_playing
    assert rows[2].cells == items[2].format


def test_build_rows_skips_offset_rows():
    items = _song_items(30)
    height = 10
    selected = 20
    rows = build_rows(song_table_header(100), items, selected, None, set(), ICON, height)
    offset = table_offset(height, selected)
    assert len(rows) == len(items) - offset
    assert rows[0].cells == items[offset].format
    assert [row.is_selected for row in rows].index(True) == selected - offset


def test_build_rows_playing_before_offset_not_marked():
    items = _song_items(30)
    rows = build_rows(song_table_header(100), items, 25, "id0", set(), ICON, 10)
    assert not any(row.is_playing for row in rows)


def test_build_rows_episodes_mark_playing_but_not_liked():
    items = [
        TableItem("ep0", ("", "2020-01-01", "First", "10:00")),
        TableItem("ep1", ("", "2020-01-02", "Second", "12:00")),
    ]
    rows = build_rows(episode_table_header(100), items, 0, "ep1", {"ep0"}, ICON, 30)
    assert rows[0].cells[0] == ""
    assert rows[1].cells[2] == "▶ Second"
    assert rows[1].is_playing


def test_build_rows_plain_table_left_unchanged():
    items = [TableItem("a1", ("Artist One",)), TableItem("a2", ("Artist Two",))]
    rows = build_rows(artist_table_header(100), items, 1, "a1", {"a1"}, ICON, 30)
    assert rows == [
        TableRow(cells=("Artist One",)),
        TableRow(cells=("Artist Two",), is_selected=True),
    ]


def test_header_texts_and_ids():
    assert [i.text for i in album_table_header(100).items] == [
        "",
        "#",
        "Title",
        "Artist",
        "Length",
    ]
    assert [i.text for i in episode_table_header(100).items] == [
        "",
        "Date",
        "Name",
        "Duration",
    ]
    assert [i.text for i in album_list_header(100).items] == [
        "Name",
        "Artists",
        "Release Date",
    ]
    assert [i.text for i in podcast_table_header(100).items] == ["Name", "Publisher(s)"]
    assert [i.text for i in made_for_you_header(100).items] == ["Name"]
    assert recently_played_header(100).id is TableId.RECENTLY_PLAYED


def test_header_fixed_widths():
    header = album_table_header(120)
    assert header.items[0].width == 2
    assert header.items[1].width == 3
    assert header.items[2].width == get_percentage_width(120, 2.0 / 5.0) - 5
    assert recently_played_header(120).items[1].width == (
        get_percentage_width(120, 2.0 / 5.0) - 2
    )


def test_artist_header_takes_full_width():
    assert artist_table_header(50).items[0].width == get_percentage_width(50, 1.0)


def test_narrow_width_raises():
    with pytest.raises(ValueError):
        album_table_header(10)


def test_custom_header_get_index():
    header = TableHeader(
        TableId.SONG,
        (TableHeaderItem("a", 1), TableHeaderItem("b", 1, ColumnId.TITLE)),
    )
    assert header.get_index(ColumnId.TITLE) == 1
    assert header.get_index(ColumnId.NONE) == 0
from types import SimpleNamespace

import pytest

from sptui.formatting import (
    create_artist_string,
    display_track_progress,
    get_color,
    get_main_layout_margin,
    get_percentage_width,
    get_track_progress_percentage,
    millis_to_minutes,
)
from sptui.user_config import Color, Theme


@pytest.mark.parametrize(
    "millis, expected",
    [
        (0, "0:00"),
        (1000, "0:01"),
        (1500, "0:01"),
        (1900, "0:01"),
        (60 * 1000, "1:00"),
        (60 * 1500, "1:30"),
    ],
)
def test_millis_to_minutes(millis, expected):
    assert millis_to_minutes(millis) == expected


def test_display_track_progress():
    assert display_track_progress(0, 2 * 60 * 1000) == "0:00/2:00 (-2:00)"
    assert display_track_progress(60 * 1000, 2 * 60 * 1000) == "1:00/2:00 (-1:00)"


def test_display_track_progress_past_end():
    assert display_track_progress(3 * 60 * 1000, 2 * 60 * 1000) == "3:00/2:00 (-0:00)"


def test_get_track_progress_percentage():
    track_length = 60 * 1000
    assert get_track_progress_percentage(0, track_length) == 0
    assert get_track_progress_percentage((60 * 1000) // 2, track_length) == 50
    assert get_track_progress_percentage(60 * 1000 * 2, track_length) == 100


def test_get_track_progress_percentage_zero_duration():
    assert get_track_progress_percentage(500, 0) == 0


def test_get_percentage_width():
    assert get_percentage_width(103, 0.5) == 50
    assert get_percentage_width(13, 1.0) == 10


def test_get_percentage_width_too_small():
    with pytest.raises(ValueError):
        get_percentage_width(2, 0.5)


def test_create_artist_string():
    artists = [SimpleNamespace(name="A"), {"name": "B"}, "C"]
    assert create_artist_string(artists) == "A, B, C"
    assert create_artist_string([]) == ""


def test_get_color():
    theme = Theme()
    assert get_color((True, True), theme) == Color("LightCyan")
    assert get_color((False, True), theme) == Color("Magenta")
    assert get_color((False, False), theme) == Color("Gray")


def test_get_main_layout_margin():
    assert get_main_layout_margin(46) == 1
    assert get_main_layout_margin(45) == 0
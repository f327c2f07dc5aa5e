# sptui

The building blocks of a terminal music player client: the user
configuration (keybindings, colour theme, behaviour settings), the text and
layout decisions that its screens are drawn from, a reader for terminal key
presses, and a small local web server that captures a sign-in redirect.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`sptui.user_config.UserConfig` holds the defaults in three parts:
`keys` (a `KeyBindings`), `theme` (a `Theme`) and `behavior` (a
`BehaviorConfig`). `load_config()` reads
`~/.config/spotify-tui/config.yml`, creating the two directories if they are
missing (`get_or_build_paths(home)` does this step on its own and returns the
file path; `home` defaults to the user's home directory). A missing or empty
file leaves the defaults as they are.

```yaml
keybindings:
  back: "ctrl-q"
  search: "/"
behavior:
  seek_milliseconds: 10000
  volume_increment: 5
  tick_rate_milliseconds: 200
  liked_icon: "*"
theme:
  active: "Cyan"
  selected: "23, 43, 45"
```

The sections can also be applied directly from mappings with
`load_keybindings`, `load_behavior` and `load_theme`.

Keys (`parse_key`) may be:

- a single character, such as `j` or `-`;
- `ctrl-<c>` or `alt-<c>` (the modifier is case-insensitive);
- a named key: `left`, `right`, `up`, `down`, `backspace` (also `delete`),
  `del` (the Delete key), `esc` or `escape`, `pageup`, `pagedown`, `space`.

The keys `h j k l H M L`, the arrow keys, Backspace and Enter are reserved
(`check_reserved_keys`) and cannot be bound.

Theme colours (`parse_theme_item`) are named colours (`Reset`, `Black`, `Red`,
`Green`, `Yellow`, `Blue`, `Magenta`, `Cyan`, `Gray`, `DarkGray`, `LightRed`,
`LightGreen`, `LightYellow`, `LightBlue`, `LightMagenta`, `LightCyan`, `White`)
or `r, g, b` triples with each component from 0 to 255. Any other text without
three comma-separated parts prints a warning and gives `Black`.

`ConfigError` is raised for an unknown key, a shortcut with more than two
parts, a reserved key, a bad colour component, a volume increment above 100, a
tick rate of 1000 or more, a value of the wrong type, or malformed YAML.

```python
from sptui.user_config import UserConfig, parse_key

config = UserConfig()
config.load_config()
print(config.keys.search, config.behavior.tick_rate_milliseconds)
print(parse_key("ctrl-d"))        # <Ctrl+d>
print(config.padded_liked_icon()) # "♥ "
```

## Views

These modules compute what the screens show; they return strings, tuples and
small dataclasses.

- `sptui.formatting`: `millis_to_minutes` (`90000` gives `"1:30"`),
  `display_track_progress` (`"1:00/2:00 (-1:00)"`),
  `get_track_progress_percentage` (clamped to 0..100), `get_percentage_width`,
  `create_artist_string`, `get_color` (theme colour for an
  `(active, hovered)` state) and `get_main_layout_margin`.
- `sptui.help`: `get_help_docs(key_bindings)` returns the help screen as a list
  of `HelpEntry(description, event, context)`, showing rebindable keys as
  currently bound; `format_help_row` lays a row out in fixed-width columns.
- `sptui.analysis`: `analyse(analysis, progress_ms)` returns an `AnalysisView`
  with tempo, key and time-signature lines and the pitch bar values, or `None`
  when no segment or section lies ahead; also `bar_chart_title` and
  `pitch_name`.
- `sptui.tables`: headers for each table (`song_table_header`,
  `album_table_header`, `recently_played_header`, `episode_table_header`,
  `album_list_header`, `podcast_table_header`, `artist_table_header`,
  `made_for_you_header`) and `build_rows`, which scrolls to keep the selected
  row visible and marks the playing and liked rows.
- `sptui.playbar`: `build_playbar` returns a `PlaybarView` (title, track name,
  subtitle, progress label and percentage); also `playbar_title`,
  `use_wide_layout`, `basic_view_space`, `dialog_rect`, `help_block_text`,
  `error_screen_lines` and `clean_changelog`.
- `sptui.listings`: the lines of the search result, artist, album, podcast,
  episode and device lists, and the titles of the recommendations, album and
  episode tables.

```python
from sptui.playbar import RepeatState, playbar_title

print(playbar_title(True, "Kitchen", False, RepeatState.CONTEXT, 50))
# Playing (Kitchen | Shuffle: Off | Repeat: All   | Volume: 50%)
```

## Sign-in helper

`sptui.redirect.redirect_uri_web_server(port, on_listen=None)` listens on
`127.0.0.1:<port>`, calls `on_listen(port)` once it is listening (with the
real port if `0` was given), and returns the request target of the first
well-formed request it receives, answering it with a short success page.
Malformed requests get a 400 answer and the server keeps waiting. If the port
cannot be bound, `RedirectError` is raised. `parse_request(data)` and
`handle_connection(conn)` are the pieces it is built from.

## Input events

`sptui.events.Events(config=None, stream=None)` reads key presses from a
binary stream (standard input by default) in one thread and puts a tick on the
same queue every `EventsConfig.tick_rate` seconds in another. `next(timeout)`
returns the next `Event` (its `key`, or `is_tick`) and raises `TimeoutError`
if none arrives in time; reading stops after the `exit_key` (Ctrl+C by
default). `close()` stops the ticks; `Events` is also a context manager.
`decode_keys(data)` turns raw terminal bytes, including arrow and
page keys and Alt combinations, into `Key` values.

## What this package does not do

- It does not talk to any streaming service: there is no API client, no token
  exchange or refresh, no playback control, search or library calls.
- It does not draw to the terminal. The view modules produce the text and
  values that screens are made of; rendering widgets is left to the caller.
- `Events` does not switch the terminal into raw mode; the caller must do that
  for single key presses to arrive unbuffered.
- There is no command to start a player.
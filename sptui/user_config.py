"""User configuration: key bindings, theme colours and behaviour settings."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml

FILE_NAME = "config.yml"
CONFIG_DIR = ".config"
APP_CONFIG_DIR = "spotify-tui"


class ConfigError(Exception):
    """Raised when the user configuration is invalid or cannot be located."""


class KeyKind(Enum):
    CHAR = "char"
    CTRL = "ctrl"
    ALT = "alt"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"


_KEY_LABELS = {
    KeyKind.ENTER: "<Enter>",
    KeyKind.ESC: "<Esc>",
    KeyKind.BACKSPACE: "<Backspace>",
    KeyKind.DELETE: "<Delete>",
    KeyKind.LEFT: "<Left Arrow Key>",
    KeyKind.RIGHT: "<Right Arrow Key>",
    KeyKind.UP: "<Up Arrow Key>",
    KeyKind.DOWN: "<Down Arrow Key>",
    KeyKind.PAGE_UP: "<PageUp>",
    KeyKind.PAGE_DOWN: "<PageDown>",
}


@dataclass(frozen=True)
class Key:
    """A keyboard key, optionally carrying a character."""

    kind: KeyKind
    value: str | None = None

    @classmethod
    def char(cls, c: str) -> "Key":
        return cls(KeyKind.CHAR, c)

    @classmethod
    def ctrl(cls, c: str) -> "Key":
        return cls(KeyKind.CTRL, c)

    @classmethod
    def alt(cls, c: str) -> "Key":
        return cls(KeyKind.ALT, c)

    def __str__(self) -> str:
        if self.kind is KeyKind.CHAR:
            return "<Space>" if self.value == " " else str(self.value)
        if self.kind is KeyKind.CTRL:
            return f"<Ctrl+{self.value}>"
        if self.kind is KeyKind.ALT:
            return f"<Alt+{self.value}>"
        return _KEY_LABELS[self.kind]


COLOR_NAMES = (
    "Reset",
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "Gray",
    "DarkGray",
    "LightRed",
    "LightGreen",
    "LightYellow",
    "LightBlue",
    "LightMagenta",
    "LightCyan",
    "White",
)


@dataclass(frozen=True)
class Color:
    """A terminal colour: one of the named colours or an RGB triple."""

    name: str
    components: tuple[int, int, int] | None = None

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls("Rgb", (r, g, b))


@dataclass
class Theme:
    analysis_bar: Color = Color("LightCyan")
    analysis_bar_text: Color = Color("Reset")
    active: Color = Color("Cyan")
    banner: Color = Color("LightCyan")
    error_border: Color = Color("Red")
    error_text: Color = Color("LightRed")
    hint: Color = Color("Yellow")
    hovered: Color = Color("Magenta")
    inactive: Color = Color("Gray")
    playbar_background: Color = Color("Black")
    playbar_progress: Color = Color("LightCyan")
    playbar_progress_text: Color = Color("LightCyan")
    playbar_text: Color = Color("Reset")
    selected: Color = Color("LightCyan")
    text: Color = Color("Reset")
    header: Color = Color("Reset")


# Theme entries a user may override; the analysis bar colours are fixed.
_USER_THEME_FIELDS = (
    "active",
    "banner",
    "error_border",
    "error_text",
    "hint",
    "hovered",
    "inactive",
    "playbar_background",
    "playbar_progress",
    "playbar_progress_text",
    "playbar_text",
    "selected",
    "text",
    "header",
)


@dataclass
class KeyBindings:
    back: Key = Key.char("q")
    next_page: Key = Key.ctrl("d")
    previous_page: Key = Key.ctrl("u")
    jump_to_start: Key = Key.ctrl("a")
    jump_to_end: Key = Key.ctrl("e")
    jump_to_album: Key = Key.char("a")
    jump_to_artist_album: Key = Key.char("A")
    jump_to_context: Key = Key.char("o")
    manage_devices: Key = Key.char("d")
    decrease_volume: Key = Key.char("-")
    increase_volume: Key = Key.char("+")
    toggle_playback: Key = Key.char(" ")
    seek_backwards: Key = Key.char("<")
    seek_forwards: Key = Key.char(">")
    next_track: Key = Key.char("n")
    previous_track: Key = Key.char("p")
    help: Key = Key.char("?")
    shuffle: Key = Key.ctrl("s")
    repeat: Key = Key.ctrl("r")
    search: Key = Key.char("/")
    submit: Key = Key(KeyKind.ENTER)
    copy_song_url: Key = Key.char("c")
    copy_album_url: Key = Key.char("C")
    audio_analysis: Key = Key.char("v")
    basic_view: Key = Key.char("B")
    add_item_to_queue: Key = Key.char("z")


@dataclass
class BehaviorConfig:
    seek_milliseconds: int = 5 * 1000
    volume_increment: int = 10
    tick_rate_milliseconds: int = 250
    enable_text_emphasis: bool = True
    show_loading_indicator: bool = True
    enforce_wide_search_bar: bool = False
    liked_icon: str = "♥"
    shuffle_icon: str = "🔀"
    repeat_track_icon: str = "🔂"
    repeat_context_icon: str = "🔁"
    playing_icon: str = "▶"
    paused_icon: str = "⏸"
    set_window_title: bool = True


_INT_LIMITS = {
    "seek_milliseconds": 2**32 - 1,
    "volume_increment": 2**8 - 1,
    "tick_rate_milliseconds": 2**64 - 1,
}
_BOOL_FIELDS = (
    "enable_text_emphasis",
    "show_loading_indicator",
    "enforce_wide_search_bar",
    "set_window_title",
)
_STR_FIELDS = (
    "liked_icon",
    "shuffle_icon",
    "repeat_track_icon",
    "repeat_context_icon",
    "playing_icon",
    "paused_icon",
)
# The order in which behaviour settings are applied.
_BEHAVIOR_ORDER = (
    "seek_milliseconds",
    "volume_increment",
    "tick_rate_milliseconds",
    "enable_text_emphasis",
    "show_loading_indicator",
    "enforce_wide_search_bar",
    "liked_icon",
    "paused_icon",
    "playing_icon",
    "shuffle_icon",
    "repeat_track_icon",
    "repeat_context_icon",
    "set_window_title",
)

_RESERVED_KEYS = frozenset(
    {
        Key.char("h"),
        Key.char("j"),
        Key.char("k"),
        Key.char("l"),
        Key.char("H"),
        Key.char("M"),
        Key.char("L"),
        Key(KeyKind.UP),
        Key(KeyKind.DOWN),
        Key(KeyKind.LEFT),
        Key(KeyKind.RIGHT),
        Key(KeyKind.BACKSPACE),
        Key(KeyKind.ENTER),
    }
)

_NAMED_KEYS = {
    "left": Key(KeyKind.LEFT),
    "right": Key(KeyKind.RIGHT),
    "up": Key(KeyKind.UP),
    "down": Key(KeyKind.DOWN),
    "backspace": Key(KeyKind.BACKSPACE),
    "delete": Key(KeyKind.BACKSPACE),
    "del": Key(KeyKind.DELETE),
    "esc": Key(KeyKind.ESC),
    "escape": Key(KeyKind.ESC),
    "pageup": Key(KeyKind.PAGE_UP),
    "pagedown": Key(KeyKind.PAGE_DOWN),
    "space": Key.char(" "),
}

_COMPONENT = re.compile(r"\+?[0-9]+")


def _first_char(text: str, key: str) -> str:
    if not text:
        raise ConfigError(f'The shortcut "{key}" is missing a key after the modifier')
    return text[0]


def parse_key(key: str) -> Key:
    """Parse a shortcut such as ``j``, ``ctrl-d`` or ``esc`` into a Key."""
    if len(key.encode("utf-8")) == 1:
        return Key.char(key)

    sections = key.split("-")
    if len(sections) > 2:
        raise ConfigError(
            f'Shortcut can only have 2 keys, "{key}" has {len(sections)}'
        )

    modifier = sections[0].lower()
    if modifier in ("ctrl", "alt"):
        if len(sections) < 2:
            raise ConfigError(f'The shortcut "{key}" is missing a key after the modifier')
        c = _first_char(sections[1], key)
        return Key.ctrl(c) if modifier == "ctrl" else Key.alt(c)

    try:
        return _NAMED_KEYS[modifier]
    except KeyError:
        raise ConfigError(f'The key "{sections[0]}" is unknown.') from None


def check_reserved_keys(key: Key) -> None:
    """Raise ConfigError if the key is reserved for navigation."""
    if key in _RESERVED_KEYS:
        raise ConfigError(f"The key {key!r} is reserved and cannot be remapped")


def _parse_component(text: str, theme_item: str) -> int:
    text = text.strip()
    if not _COMPONENT.fullmatch(text) or int(text) > 255:
        raise ConfigError(f'Invalid colour component "{text}" in "{theme_item}"')
    return int(text)


def parse_theme_item(theme_item: str) -> Color:
    """Parse a colour name or a ``r, g, b`` triple."""
    if theme_item in COLOR_NAMES:
        return Color(theme_item)

    parts = theme_item.split(",")
    if len(parts) >= 3:
        r, g, b = (_parse_component(p, theme_item) for p in parts[:3])
        return Color.rgb(r, g, b)

    print(f"Unexpected color {theme_item}")
    return Color("Black")


def _require_mapping(value: Any, section: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"The {section} section must be a mapping")
    return value


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{name}: expected a string, got {value!r}")
    return value


def _check_behavior_value(name: str, value: Any) -> Any:
    if name in _INT_LIMITS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{name}: expected an integer, got {value!r}")
        if not 0 <= value <= _INT_LIMITS[name]:
            raise ConfigError(f"{name}: value {value} is out of range")
        return value
    if name in _BOOL_FIELDS:
        if not isinstance(value, bool):
            raise ConfigError(f"{name}: expected a boolean, got {value!r}")
        return value
    return _require_str(name, value)


@dataclass
class UserConfig:
    """The effective configuration: defaults overlaid with the user's file."""

    keys: KeyBindings = field(default_factory=KeyBindings)
    theme: Theme = field(default_factory=Theme)
    behavior: BehaviorConfig = field(default_factory=BehaviorConfig)
    config_file_path: Path | None = None

    def get_or_build_paths(self, home: Path | str | None = None) -> Path:
        """Create the configuration directory under ``home`` and return the file path."""
        if home is None:
            try:
                home = Path.home()
            except RuntimeError:
                raise ConfigError(
                    "No $HOME directory found for client config"
                ) from None
        home_config_dir = Path(home) / CONFIG_DIR
        app_config_dir = home_config_dir / APP_CONFIG_DIR
        home_config_dir.mkdir(exist_ok=True)
        app_config_dir.mkdir(exist_ok=True)
        self.config_file_path = app_config_dir / FILE_NAME
        return self.config_file_path

    def load_keybindings(self, keybindings: Mapping[str, Any]) -> None:
        for binding in fields(KeyBindings):
            value = keybindings.get(binding.name)
            if value is None:
                continue
            key = parse_key(_require_str(binding.name, value))
            check_reserved_keys(key)
            setattr(self.keys, binding.name, key)

    def load_theme(self, theme: Mapping[str, Any]) -> None:
        for name in _USER_THEME_FIELDS:
            value = theme.get(name)
            if value is None:
                continue
            setattr(self.theme, name, parse_theme_item(_require_str(name, value)))

    def load_behavior(self, behavior: Mapping[str, Any]) -> None:
        values = {
            name: _check_behavior_value(name, behavior[name])
            for name in _BEHAVIOR_ORDER
            if behavior.get(name) is not None
        }
        for name, value in values.items():
            if name == "volume_increment" and value > 100:
                raise ConfigError(
                    f"Volume increment must be between 0 and 100, is {value}"
                )
            if name == "tick_rate_milliseconds" and value >= 1000:
                raise ConfigError("Tick rate must be below 1000")
            setattr(self.behavior, name, value)

    def load_config(self) -> None:
        """Read the configuration file, if any, and apply it."""
        path = self.config_file_path or self.get_or_build_paths()
        if not path.exists():
            return
        text = path.read_text(encoding="utf-8")
        if not text.strip():
            return

        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid configuration file: {exc}") from exc
        if document is None:
            return
        document = _require_mapping(document, "top-level")

        if document.get("keybindings") is not None:
            self.load_keybindings(_require_mapping(document["keybindings"], "keybindings"))
        if document.get("behavior") is not None:
            self.load_behavior(_require_mapping(document["behavior"], "behavior"))
        if document.get("theme") is not None:
            self.load_theme(_require_mapping(document["theme"], "theme"))

    def padded_liked_icon(self) -> str:
        return f"{self.behavior.liked_icon} "
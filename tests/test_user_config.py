import pytest

from sptui.user_config import (
    Color,
    ConfigError,
    Key,
    KeyKind,
    UserConfig,
    check_reserved_keys,
    parse_key,
    parse_theme_item,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("j", Key.char("j")),
        ("J", Key.char("J")),
        ("ctrl-j", Key.ctrl("j")),
        ("ctrl-J", Key.ctrl("J")),
        ("-", Key.char("-")),
        ("esc", Key(KeyKind.ESC)),
        ("del", Key(KeyKind.DELETE)),
        ("alt-x", Key.alt("x")),
        ("space", Key.char(" ")),
        ("delete", Key(KeyKind.BACKSPACE)),
        ("PageDown", Key(KeyKind.PAGE_DOWN)),
    ],
)
def test_parse_key(text, expected):
    assert parse_key(text) == expected


@pytest.mark.parametrize("text", ["ctrl-a-b", "hyper-x", "", "ctrl-", "ctrl"])
def test_parse_key_errors(text):
    with pytest.raises(ConfigError):
        parse_key(text)


def test_parse_key_too_many_sections_message():
    with pytest.raises(ConfigError, match='"ctrl-a-b" has 3'):
        parse_key("ctrl-a-b")


@pytest.mark.parametrize(
    "name",
    [
        "Reset", "Black", "Red", "Green", "Yellow", "Blue", "Magenta", "Cyan",
        "Gray", "DarkGray", "LightRed", "LightGreen", "LightYellow",
        "LightBlue", "LightMagenta", "LightCyan", "White",
    ],
)
def test_parse_theme_item_names(name):
    assert parse_theme_item(name) == Color(name)


def test_parse_theme_item_rgb():
    assert parse_theme_item("23, 43, 45") == Color.rgb(23, 43, 45)


def test_parse_theme_item_bad_rgb_raises():
    with pytest.raises(ConfigError):
        parse_theme_item("300, 1, 2")


def test_parse_theme_item_unknown_falls_back_to_black():
    assert parse_theme_item("Purple") == Color("Black")


def test_reserved_key():
    with pytest.raises(ConfigError):
        check_reserved_keys(Key(KeyKind.ENTER))


def test_unreserved_key_is_accepted():
    assert check_reserved_keys(Key.char("x")) is None


def test_key_display():
    assert str(Key.ctrl("d")) == "<Ctrl+d>"
    assert str(Key.char("q")) == "q"
    assert str(Key(KeyKind.ENTER)) == "<Enter>"


def test_defaults():
    config = UserConfig()
    assert config.keys.back == Key.char("q")
    assert config.keys.submit == Key(KeyKind.ENTER)
    assert config.behavior.seek_milliseconds == 5000
    assert config.behavior.tick_rate_milliseconds == 250
    assert config.theme.active == Color("Cyan")
    assert config.padded_liked_icon() == "♥ "


def test_load_keybindings_rejects_reserved():
    config = UserConfig()
    with pytest.raises(ConfigError):
        config.load_keybindings({"back": "h"})


def test_load_keybindings_applies_values():
    config = UserConfig()
    config.load_keybindings({"back": "ctrl-q", "unknown_field": "x"})
    assert config.keys.back == Key.ctrl("q")


def test_load_behavior_limits():
    config = UserConfig()
    with pytest.raises(ConfigError, match="Volume increment"):
        config.load_behavior({"volume_increment": 101})
    with pytest.raises(ConfigError, match="Tick rate"):
        config.load_behavior({"tick_rate_milliseconds": 1000})


def test_load_behavior_type_error():
    config = UserConfig()
    with pytest.raises(ConfigError):
        config.load_behavior({"enable_text_emphasis": "yes please"})


def test_load_behavior_sets_values():
    config = UserConfig()
    config.load_behavior({"liked_icon": "*", "volume_increment": 5})
    assert config.padded_liked_icon() == "* "
    assert config.behavior.volume_increment == 5


def test_load_theme():
    config = UserConfig()
    config.load_theme({"active": "Red", "text": "1,2,3"})
    assert config.theme.active == Color("Red")
    assert config.theme.text == Color.rgb(1, 2, 3)


def test_get_or_build_paths(tmp_path):
    config = UserConfig()
    path = config.get_or_build_paths(tmp_path)
    assert path == tmp_path / ".config" / "spotify-tui" / "config.yml"
    assert path.parent.is_dir()


def test_load_config_from_file(tmp_path):
    config = UserConfig()
    path = config.get_or_build_paths(tmp_path)
    path.write_text(
        "keybindings:\n  back: ctrl-c\nbehavior:\n  seek_milliseconds: 1000\n"
        "theme:\n  hint: Blue\n",
        encoding="utf-8",
    )
    config.load_config()
    assert config.keys.back == Key.ctrl("c")
    assert config.behavior.seek_milliseconds == 1000
    assert config.theme.hint == Color("Blue")


def test_load_config_empty_file_keeps_defaults(tmp_path):
    config = UserConfig()
    path = config.get_or_build_paths(tmp_path)
    path.write_text("   \n", encoding="utf-8")
    config.load_config()
    assert config.keys.back == Key.char("q")


def test_load_config_invalid_yaml(tmp_path):
    config = UserConfig()
    path = config.get_or_build_paths(tmp_path)
    path.write_text("keybindings: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        config.load_config()
"""The rows of the help screen, built from the active key bindings."""

from __future__ import annotations

from dataclasses import dataclass

from .user_config import KeyBindings

DESCRIPTION_WIDTH = 50
EVENT_WIDTH = 40
CONTEXT_WIDTH = 20

HELP_HEADER = ("Description", "Event", "Context")


@dataclass(frozen=True)
class HelpEntry:
    """One line of the help menu."""

    description: str
    event: str
    context: str


def get_help_docs(key_bindings: KeyBindings) -> list[HelpEntry]:
    """Return every help entry, with rebindable keys shown as currently bound."""
    kb = key_bindings
    rows = [
        ("Scroll down to next result page", str(kb.next_page), "Pagination"),
        ("Scroll up to previous result page", str(kb.previous_page), "Pagination"),
        ("Jump to start of playlist", str(kb.jump_to_start), "Pagination"),
        ("Jump to end of playlist", str(kb.jump_to_end), "Pagination"),
        ("Jump to currently playing album", str(kb.jump_to_album), "General"),
        (
            "Jump to currently playing artist's album list",
            str(kb.jump_to_artist_album),
            "General",
        ),
        ("Jump to current play context", str(kb.jump_to_context), "General"),
        ("Increase volume by 10%", str(kb.increase_volume), "General"),
        ("Decrease volume by 10%", str(kb.decrease_volume), "General"),
        ("Skip to next track", str(kb.next_track), "General"),
        ("Skip to previous track", str(kb.previous_track), "General"),
        ("Seek backwards 5 seconds", str(kb.seek_backwards), "General"),
        ("Seek forwards 5 seconds", str(kb.seek_forwards), "General"),
        ("Toggle shuffle", str(kb.shuffle), "General"),
        (
            "Copy url to currently playing song/episode",
            str(kb.copy_song_url),
            "General",
        ),
        (
            "Copy url to currently playing album/show",
            str(kb.copy_album_url),
            "General",
        ),
        ("Cycle repeat mode", str(kb.repeat), "General"),
        ("Move selection left", "h | <Left Arrow Key> | <Ctrl+b>", "General"),
        ("Move selection down", "j | <Down Arrow Key> | <Ctrl+n>", "General"),
        ("Move selection up", "k | <Up Arrow Key> | <Ctrl+p>", "General"),
        ("Move selection right", "l | <Right Arrow Key> | <Ctrl+f>", "General"),
        ("Move selection to top of list", "H", "General"),
        ("Move selection to middle of list", "M", "General"),
        ("Move selection to bottom of list", "L", "General"),
        ("Enter input for search", str(kb.search), "General"),
        ("Pause/Resume playback", str(kb.toggle_playback), "General"),
        ("Enter active mode", "<Enter>", "General"),
        ("Go to audio analysis screen", str(kb.audio_analysis), "General"),
        ("Go to playbar only screen (basic view)", str(kb.basic_view), "General"),
        ("Go back or exit when nowhere left to back to", str(kb.back), "General"),
        ("Select device to play music on", str(kb.manage_devices), "General"),
        ("Enter hover mode", "<Esc>", "Selected block"),
        ("Save track in list or table", "s", "Selected block"),
        (
            "Start playback or enter album/artist/playlist",
            str(kb.submit),
            "Selected block",
        ),
        ("Play recommendations for song/artist", "r", "Selected block"),
        ("Play all tracks for artist", "e", "Library -> Artists"),
        ("Search with input text", "<Enter>", "Search input"),
        ("Move cursor one space left", "<Left Arrow Key>", "Search input"),
        ("Move cursor one space right", "<Right Arrow Key>", "Search input"),
        ("Delete entire input", "<Ctrl+l>", "Search input"),
        ("Delete text from cursor to start of input", "<Ctrl+u>", "Search input"),
        ("Delete text from cursor to end of input", "<Ctrl+k>", "Search input"),
        ("Delete previous word", "<Ctrl+w>", "Search input"),
        ("Jump to start of input", "<Ctrl+a>", "Search input"),
        ("Jump to end of input", "<Ctrl+e>", "Search input"),
        ("Escape from the input back to hovered block", "<Esc>", "Search input"),
        ("Delete saved album", "D", "Library -> Albums"),
        ("Delete saved playlist", "D", "Playlist"),
        ("Follow an artist/playlist", "w", "Search result"),
        ("Save (like) album to library", "w", "Search result"),
        ("Play random song in playlist", "S", "Selected Playlist"),
        ("Toggle sort order of podcast episodes", "S", "Selected Show"),
        ("Add track to queue", str(kb.add_item_to_queue), "Hovered over track"),
    ]
    return [HelpEntry(*row) for row in rows]


def format_help_row(description: str, event: str, context: str) -> str:
    """Lay out one help row as fixed-width, left-aligned columns."""
    return (
        f"{description:<{DESCRIPTION_WIDTH}}"
        f"{event:<{EVENT_WIDTH}}"
        f"{context:<{CONTEXT_WIDTH}}"
    )
"""Terminal input and tick events, each produced by its own thread."""

from __future__ import annotations

import queue
import sys
import threading
from dataclasses import dataclass, field
from typing import BinaryIO

from .user_config import Key, KeyKind

_ARROWS = {
    ord("A"): Key(KeyKind.UP),
    ord("B"): Key(KeyKind.DOWN),
    ord("C"): Key(KeyKind.RIGHT),
    ord("D"): Key(KeyKind.LEFT),
}
_TILDE_CODES = {
    b"3": Key(KeyKind.DELETE),
    b"5": Key(KeyKind.PAGE_UP),
    b"6": Key(KeyKind.PAGE_DOWN),
}
_CSI_PARAMS = frozenset(b"0123456789;")


@dataclass(frozen=True)
class Event:
    """An input event carrying a key, or a tick when ``key`` is None."""

    key: Key | None = None

    @property
    def is_tick(self) -> bool:
        return self.key is None


@dataclass(frozen=True)
class EventsConfig:
    exit_key: Key = field(default_factory=lambda: Key.ctrl("c"))
    tick_rate: float = 0.25


def _utf8_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC0 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF7:
        return 4
    return 0


def _decode_char(data: bytes, i: int) -> tuple[str | None, int]:
    width = _utf8_width(data[i])
    if width == 0:
        return None, i + 1
    try:
        return data[i : i + width].decode("utf-8"), i + width
    except UnicodeDecodeError:
        return None, i + 1


def _decode_escape(data: bytes, i: int) -> tuple[Key | None, int]:
    """Decode what follows an ESC byte at ``i - 1``."""
    if i >= len(data):
        return Key(KeyKind.ESC), i
    nxt = data[i]
    if nxt == ord("["):
        j = i + 1
        while j < len(data) and data[j] in _CSI_PARAMS:
            j += 1
        if j >= len(data):
            return Key.alt("["), i + 1
        params, final = data[i + 1 : j], data[j]
        if not params and final in _ARROWS:
            return _ARROWS[final], j + 1
        if final == ord("~"):
            return _TILDE_CODES.get(params), j + 1
        return None, j + 1
    if nxt == ord("O") and i + 1 < len(data) and data[i + 1] in _ARROWS:
        return _ARROWS[data[i + 1]], i + 2
    if nxt < 0x20 or nxt == 0x7F:
        return Key(KeyKind.ESC), i
    char, end = _decode_char(data, i)
    if char is None:
        return Key(KeyKind.ESC), i
    return Key.alt(char), end


def _decode_one(data: bytes, i: int) -> tuple[Key | None, int]:
    b = data[i]
    if b == 0x1B:
        return _decode_escape(data, i + 1)
    if b in (0x0A, 0x0D):
        return Key(KeyKind.ENTER), i + 1
    if b == 0x09:
        return Key.char("\t"), i + 1
    if b == 0x7F:
        return Key(KeyKind.BACKSPACE), i + 1
    if 0x01 <= b <= 0x1A:
        return Key.ctrl(chr(b - 1 + ord("a"))), i + 1
    if 0x1C <= b <= 0x1F:
        return Key.ctrl(chr(b - 0x1C + ord("4"))), i + 1
    if b == 0x00:
        return None, i + 1
    char, end = _decode_char(data, i)
    return (Key.char(char) if char is not None else None), end


def decode_keys(data: bytes) -> list[Key]:
    """Decode raw terminal input bytes into keys; unrecognised bytes are dropped."""
    keys = []
    position = 0
    while position < len(data):
        key, position = _decode_one(data, position)
        if key is not None:
            keys.append(key)
    return keys


class Events:
    """Merges key presses read from a stream with periodic ticks into one queue."""

    def __init__(
        self, config: EventsConfig | None = None, stream: BinaryIO | None = None
    ) -> None:
        self.config = config or EventsConfig()
        self._queue: queue.Queue[Event] = queue.Queue()
        self._stop = threading.Event()
        self._stream = stream if stream is not None else sys.stdin.buffer
        self._input_thread = threading.Thread(target=self._read_input, daemon=True)
        self._tick_thread = threading.Thread(target=self._tick, daemon=True)
        self._input_thread.start()
        self._tick_thread.start()

    def _read_input(self) -> None:
        read = getattr(self._stream, "read1", self._stream.read)
        while not self._stop.is_set():
            try:
                chunk = read(1024)
            except (OSError, ValueError):
                return
            if not chunk:
                return
            for key in decode_keys(chunk):
                self._queue.put(Event(key))
                if key == self.config.exit_key:
                    return

    def _tick(self) -> None:
        while not self._stop.is_set():
            self._queue.put(Event())
            self._stop.wait(self.config.tick_rate)

    def next(self, timeout: float | None = None) -> Event:
        """Return the next event; raise TimeoutError if none arrives in time."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event received") from None

    def close(self) -> None:
        """Stop producing ticks."""
        self._stop.set()
        self._tick_thread.join(timeout=1.0)

    def __enter__(self) -> "Events":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
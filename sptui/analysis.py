"""Audio analysis view: tempo, key and pitch bars at the current position."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

PITCHES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

NO_ANALYSIS = "No analysis available"
NO_PITCH_INFORMATION = "No pitch information available"

_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class AnalysisView:
    """Text lines for the analysis block and (pitch, value) pairs for the bar chart."""

    lines: tuple[str, ...]
    bars: tuple[tuple[str, int], ...]


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item[name]
    return getattr(item, name)


def _display_number(value: float | int) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _to_u64(value: float) -> int:
    """Convert like a saturating float-to-unsigned cast."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U64_MAX:
        return _U64_MAX
    return int(value)


def _first_from(items: Iterable[Any], position: float) -> Any:
    return next((item for item in items if _field(item, "start") >= position), None)


def pitch_name(index: int) -> str:
    """Name of the pitch class at ``index``, falling back to C."""
    return PITCHES[index] if 0 <= index < len(PITCHES) else PITCHES[0]


def bar_chart_title(tick_rate: int) -> str:
    """Title of the pitch chart, showing tick rate and frames per second."""
    if tick_rate <= 0:
        raise ValueError("tick rate must be positive")
    return f"Pitches | Tick Rate {tick_rate} {1000 // tick_rate}FPS"


def analyse(analysis: Any, progress_ms: int) -> AnalysisView | None:
    """Build the analysis view for the playback position, or None if nothing lies ahead.

    ``analysis`` holds ``beats``, ``segments`` and ``sections``; each entry may be a
    mapping or an object with the matching attributes.
    """
    progress_seconds = progress_ms / 1000.0

    beat = _first_from(_field(analysis, "beats"), progress_seconds)
    beat_offset = _field(beat, "start") - progress_seconds if beat is not None else 0.0
    segment = _first_from(_field(analysis, "segments"), progress_seconds)
    section = _first_from(_field(analysis, "sections"), progress_seconds)
    if segment is None or section is None:
        return None

    lines = (
        "Tempo: {} (confidence {:.0f}%)".format(
            _display_number(_field(section, "tempo")),
            _field(section, "tempo_confidence") * 100.0,
        ),
        "Key: {} (confidence {:.0f}%)".format(
            pitch_name(int(_field(section, "key"))),
            _field(section, "key_confidence") * 100.0,
        ),
        "Time Signature: {}/4 (confidence {:.0f}%)".format(
            _display_number(_field(section, "time_signature")),
            _field(section, "time_signature_confidence") * 100.0,
        ),
    )

    # The beat offset makes the bars animate between beats.
    offset_value = _to_u64(beat_offset * 3000.0)
    bars = []
    for index, pitch in enumerate(_field(segment, "pitches")):
        value = _to_u64(pitch * 1000.0) + offset_value
        bars.append((pitch_name(index), value if value <= _U64_MAX else 0))

    return AnalysisView(lines=lines, bars=tuple(bars))
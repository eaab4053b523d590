"""Three-voice tracker music driving an emulated sound chip register file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

SID_REGISTER_COUNT = 25
VOICE_REGISTER_STRIDE = 7

FREQ_LO = 0
FREQ_HI = 1
PW_LO = 2
PW_HI = 3
CONTROL = 4
ATTACK_DECAY = 5
SUSTAIN_RELEASE = 6

FILTER_FC_LO = 21
FILTER_FC_HI = 22
FILTER_RES = 23
FILTER_MODE = 24
VOLUME = 24

WAVE_TRIANGLE = 0x10
WAVE_SAWTOOTH = 0x20
WAVE_PULSE = 0x40
WAVE_NOISE = 0x80
GATE = 0x01
SYNC = 0x02
RING = 0x04
TEST = 0x08

NOTE_REST = 0
NOTE_COUNT = 48
MASTER_VOLUME = 12
BASS_VOICE = 3

_NOTE_FREQUENCIES: tuple[int, ...] = (
    1076, 1140, 1208, 1280, 1356, 1437, 1523, 1614, 1710, 1812, 1920, 2034,
    2152, 2281, 2416, 2559, 2711, 2873, 3046, 3229, 3421, 3625, 3840, 4068,
    4305, 4562, 4833, 5119, 5423, 5746, 6092, 6458, 6843, 7251, 7680, 8137,
    8610, 9125, 9667, 10239, 10847, 11493, 12184, 12916, 13686, 14502, 15361, 16274,
)


class TrackId(IntEnum):
    MENU = 0
    COMBAT = 1


def note_frequency(index: int) -> int:
    """Oscillator frequency value for note ``index`` (1..48)."""
    if not 1 <= index <= NOTE_COUNT:
        raise ValueError(f"note index {index} is outside 1..{NOTE_COUNT}")
    return _NOTE_FREQUENCIES[index - 1]


def _is_rest(index: int) -> bool:
    return index == NOTE_REST or index > NOTE_COUNT


@dataclass(frozen=True)
class Note:
    """A note index (0 is a rest) held for ``duration`` ticks."""

    note: int
    duration: int


@dataclass(frozen=True)
class Pattern:
    """A looping sequence of notes for one voice."""

    notes: tuple[Note, ...]
    loop_point: int = 0

    def __post_init__(self) -> None:
        if not self.notes:
            raise ValueError("a pattern needs at least one note")
        if not 0 <= self.loop_point < len(self.notes):
            raise ValueError(f"loop point {self.loop_point} is outside the pattern")

    @property
    def length(self) -> int:
        return len(self.notes)

    @property
    def total_ticks(self) -> int:
        return sum(note.duration for note in self.notes)


@dataclass(frozen=True)
class Track:
    """One pattern for each of the three voices."""

    voices: tuple[Pattern, Pattern, Pattern]
    ticks_per_note: int = 1


def _pattern(*pairs: tuple[int, int]) -> Pattern:
    return Pattern(tuple(Note(note, duration) for note, duration in pairs))


def _pulsed_bass(*roots: int) -> Pattern:
    pairs: list[tuple[int, int]] = []
    for root in roots:
        pairs.extend(((root, 30), (NOTE_REST, 30)) * 8)
    return _pattern(*pairs)


MENU_TRACK = Track((
    _pattern(
        (25, 120), (0, 60), (31, 30), (28, 30),
        (25, 60), (23, 30), (31, 90), (0, 30),
        (28, 60), (31, 60), (37, 60), (23, 60),
        (31, 120), (0, 60), (30, 30), (28, 30),
    ),
    _pattern(
        (16, 240), (16, 240),
        (8, 240), (8, 240),
        (11, 240), (11, 240),
        (16, 240), (16, 240),
    ),
    _pulsed_bass(1, 6, 7, 1),
))

COMBAT_TRACK = Track((
    _pattern(
        (18, 15), (20, 15), (25, 15), (30, 15), (25, 15), (20, 15), (18, 15), (20, 15),
        (25, 15), (30, 15), (32, 15), (30, 15), (28, 15), (25, 15), (20, 15), (18, 15),
        (30, 30), (28, 15), (25, 15), (30, 30), (32, 15), (30, 15),
        (28, 30), (25, 15), (20, 15), (25, 60),
        (30, 15), (30, 15), (32, 15), (30, 15), (28, 15), (30, 15), (25, 15), (28, 15),
        (30, 30), (25, 15), (20, 15), (25, 30), (18, 30),
        (30, 15), (32, 15), (31, 15), (30, 15), (28, 15), (25, 15), (28, 15), (30, 15),
        (32, 60), (30, 30), (28, 30),
        (25, 30), (30, 30), (25, 30), (28, 30),
        (20, 30), (32, 30), (20, 30), (30, 30),
        (25, 15), (28, 15), (30, 15), (32, 15), (30, 15), (28, 15), (25, 15), (20, 15),
        (18, 60), (25, 30), (30, 30),
        (30, 15), (0, 15), (30, 15), (32, 15), (30, 15), (0, 15), (28, 15), (30, 15),
        (25, 15), (0, 15), (25, 15), (28, 15), (25, 15), (0, 15), (20, 15), (25, 15),
        (30, 30), (32, 30), (31, 30), (30, 30),
        (28, 60), (30, 60),
    ),
    _pattern(
        (13, 60), (16, 30), (18, 30), (20, 60), (16, 60),
        (13, 60), (20, 60), (18, 120),
        (18, 30), (20, 30), (25, 30), (20, 30),
        (16, 60), (13, 60),
        (20, 30), (25, 30), (20, 30), (18, 30),
        (16, 60), (18, 60),
        (13, 60), (18, 60),
        (8, 60), (20, 60),
        (13, 30), (16, 30), (18, 30), (20, 30),
        (13, 120),
        (18, 30), (20, 30), (18, 30), (16, 30),
        (13, 30), (16, 30), (13, 30), (8, 30),
        (18, 60), (20, 60),
        (16, 60), (18, 60),
    ),
    _pattern(
        (6, 60), (6, 60), (8, 60), (8, 60),
        (4, 60), (4, 60), (1, 60), (1, 60),
        (6, 60), (8, 60), (4, 60), (1, 60),
        (6, 60), (8, 60), (4, 60), (1, 60),
        (1, 60), (1, 60), (8, 60), (8, 60),
        (6, 60), (6, 60), (1, 60), (1, 60),
        (6, 60), (8, 60), (4, 60), (1, 60),
        (6, 60), (8, 60), (4, 60), (6, 60),
    ),
))

TRACKS: dict[TrackId, Track] = {
    TrackId.MENU: MENU_TRACK,
    TrackId.COMBAT: COMBAT_TRACK,
}


def _voice_base(voice: int) -> int:
    if not 1 <= voice <= 3:
        raise ValueError(f"voice {voice} is outside 1..3")
    return (voice - 1) * VOICE_REGISTER_STRIDE


class Sid:
    """The sound chip's 25 write registers.

    ``gate_triggers`` counts, per voice, how often the gate bit went from
    off to on, i.e. how many notes were started.
    """

    def __init__(self) -> None:
        self.registers = bytearray(SID_REGISTER_COUNT)
        self.gate_triggers = [0, 0, 0]

    def __getitem__(self, offset: int) -> int:
        return self.registers[offset]

    def __setitem__(self, offset: int, value: int) -> None:
        value &= 0xFF
        voice, register = divmod(offset, VOICE_REGISTER_STRIDE)
        if voice < 3 and register == CONTROL:
            if not self.registers[offset] & GATE and value & GATE:
                self.gate_triggers[voice] += 1
        self.registers[offset] = value

    def voice_control(self, voice: int) -> int:
        """Control register of ``voice`` (1..3)."""
        return self.registers[_voice_base(voice) + CONTROL]

    def voice_frequency(self, voice: int) -> int:
        """16-bit frequency of ``voice`` (1..3)."""
        base = _voice_base(voice)
        return self.registers[base + FREQ_LO] | (self.registers[base + FREQ_HI] << 8)


@dataclass
class _Voice:
    position: int = 0
    ticks: int = 0
    gate_active: bool = False
    last_note: int = NOTE_REST


class MusicPlayer:
    """Steps a track one tick per ``update`` and writes the chip registers."""

    def __init__(self, sid: Optional[Sid] = None) -> None:
        self.sid = sid if sid is not None else Sid()
        for offset in range(SID_REGISTER_COUNT):
            self.sid[offset] = 0
        self.sid[VOLUME] = MASTER_VOLUME

        v1 = _voice_base(1)
        self.sid[v1 + ATTACK_DECAY] = 0x35
        self.sid[v1 + SUSTAIN_RELEASE] = 0x95
        self.sid[v1 + CONTROL] = WAVE_TRIANGLE

        v2 = _voice_base(2)
        self.sid[v2 + ATTACK_DECAY] = 0x78
        self.sid[v2 + SUSTAIN_RELEASE] = 0x78
        self.sid[v2 + PW_LO] = 0x00
        self.sid[v2 + PW_HI] = 0x08
        self.sid[v2 + CONTROL] = WAVE_PULSE

        v3 = _voice_base(3)
        self.sid[v3 + ATTACK_DECAY] = 0x08
        self.sid[v3 + SUSTAIN_RELEASE] = 0x04
        self.sid[v3 + CONTROL] = WAVE_SAWTOOTH

        self.playing = False
        self.tick_counter = 0
        self.current_track: Optional[Track] = None
        self.voices = [_Voice() for _ in range(3)]

    def play(self, track_id: int) -> None:
        """Start a track from the beginning; unknown ids are ignored."""
        track = TRACKS.get(track_id)
        if track is None:
            return
        self.current_track = track
        self.voices = [_Voice() for _ in range(3)]
        self.tick_counter = 0
        self.playing = True

    def stop(self) -> None:
        """Stop playback and release every voice."""
        self.playing = False
        for voice in (1, 2, 3):
            offset = _voice_base(voice) + CONTROL
            self.sid[offset] = self.sid[offset] & ~GATE

    def _set_note(self, voice: int, state: _Voice, note_index: int) -> None:
        control = _voice_base(voice) + CONTROL
        if _is_rest(note_index):
            if state.gate_active:
                self.sid[control] = self.sid[control] & ~GATE
                state.gate_active = False
            state.last_note = NOTE_REST
            return

        freq = note_frequency(note_index)
        # Melody and harmony glide between notes; the bass always restarts.
        retrigger = not state.gate_active or voice == BASS_VOICE
        if retrigger:
            self.sid[control] = self.sid[control] & ~GATE
        base = _voice_base(voice)
        self.sid[base + FREQ_LO] = freq & 0xFF
        self.sid[base + FREQ_HI] = (freq >> 8) & 0xFF
        if retrigger:
            self.sid[control] = self.sid[control] | GATE
        state.gate_active = True
        state.last_note = note_index

    def update(self) -> None:
        """Advance playback by one tick."""
        if not self.playing or self.current_track is None:
            return
        voices = zip(self.voices, self.current_track.voices)
        for number, (state, pattern) in enumerate(voices, start=1):
            if state.ticks == 0:
                note = pattern.notes[state.position]
                self._set_note(number, state, note.note)
                state.ticks = note.duration
                state.position += 1
                if state.position >= pattern.length:
                    state.position = pattern.loop_point
            state.ticks = (state.ticks - 1) & 0xFF
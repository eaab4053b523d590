"""Fixed 64-byte save file holding unlocks and lifetime statistics."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

from retrocards.player import Player

SAVE_FILE_NAME = "cardbattle.sav"
SIGNATURE = b"CARD"
SAVE_VERSION = 1
SAVE_SIZE = 64

_LAYOUT = struct.Struct("<4sBHBB54x")

PathType = Union[str, "PathLike[str]"]


class SaveError(Exception):
    """The save file could not be written, read or validated."""


def checksum(data: bytes) -> int:
    """Sum of ``data`` modulo 256."""
    return sum(data) & 0xFF


@dataclass
class SaveData:
    """The persistent part of the player's state."""

    unlocks: int = 0
    total_runs: int = 0
    total_wins: int = 0
    version: int = SAVE_VERSION

    def to_bytes(self) -> bytes:
        body = _LAYOUT.pack(
            SIGNATURE,
            self.version & 0xFF,
            self.unlocks & 0xFFFF,
            self.total_runs & 0xFF,
            self.total_wins & 0xFF,
        )
        return body + bytes([checksum(body)])

    @classmethod
    def from_bytes(cls, data: bytes) -> "SaveData":
        """Parse a save image; raises SaveError if it is short or corrupt."""
        if len(data) < SAVE_SIZE:
            raise SaveError(f"save data is {len(data)} bytes, expected {SAVE_SIZE}")
        data = data[:SAVE_SIZE]
        signature, version, unlocks, runs, wins = _LAYOUT.unpack(data[:-1])
        if signature != SIGNATURE:
            raise SaveError("invalid save signature")
        if checksum(data[:-1]) != data[-1]:
            raise SaveError("save checksum mismatch")
        return cls(unlocks=unlocks, total_runs=runs, total_wins=wins, version=version)

    @classmethod
    def from_player(cls, player: Player) -> "SaveData":
        return cls(
            unlocks=player.unlocks,
            total_runs=player.total_runs,
            total_wins=player.total_wins,
        )

    def apply_to(self, player: Player) -> None:
        player.unlocks = self.unlocks
        player.total_runs = self.total_runs
        player.total_wins = self.total_wins


def save_game(player: Player, path: PathType = SAVE_FILE_NAME) -> None:
    """Write the player's persistent state to ``path``."""
    try:
        with open(path, "wb") as handle:
            handle.write(SaveData.from_player(player).to_bytes())
    except OSError as exc:
        raise SaveError(f"cannot write save file: {exc}") from exc


def load_game(player: Player, path: PathType = SAVE_FILE_NAME) -> SaveData:
    """Load a save into ``player``; the player is untouched if loading fails."""
    try:
        with open(path, "rb") as handle:
            data = handle.read(SAVE_SIZE)
    except OSError as exc:
        raise SaveError(f"cannot read save file: {exc}") from exc
    save = SaveData.from_bytes(data)
    save.apply_to(player)
    return save
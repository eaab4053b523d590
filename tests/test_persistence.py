import pytest

from retrocards.persistence import (
    SAVE_SIZE,
    SaveData,
    SaveError,
    checksum,
    load_game,
    save_game,
)
from retrocards.player import Player


def test_checksum_wraps():
    assert checksum(bytes([200, 100])) == (300 & 0xFF)
    assert checksum(b"") == 0


def test_image_layout():
    data = SaveData(unlocks=0x1234, total_runs=7, total_wins=2).to_bytes()
    assert len(data) == SAVE_SIZE == 64
    assert data[:4] == b"CARD"
    assert data[4] == 1
    assert data[5:7] == (0x1234).to_bytes(2, "little")
    assert data[7] == 7
    assert data[8] == 2
    assert data[9:63] == bytes(54)
    assert data[63] == checksum(data[:63])


def test_round_trip():
    original = SaveData(unlocks=0x0FFF, total_runs=250, total_wins=17)
    assert SaveData.from_bytes(original.to_bytes()) == original


def test_bad_checksum_rejected():
    data = bytearray(SaveData(unlocks=7).to_bytes())
    data[-1] ^= 0xFF
    with pytest.raises(SaveError):
        SaveData.from_bytes(bytes(data))


def test_bad_signature_rejected():
    data = bytearray(SaveData(unlocks=7).to_bytes())
    data[0:4] = b"XXXX"
    data[-1] = checksum(data[:-1])
    with pytest.raises(SaveError):
        SaveData.from_bytes(bytes(data))


def test_short_data_rejected():
    with pytest.raises(SaveError):
        SaveData.from_bytes(SaveData().to_bytes()[:40])


def test_from_player_and_apply():
    player = Player(unlocks=0x001F, total_runs=4, total_wins=1)
    save = SaveData.from_player(player)
    other = Player()
    save.apply_to(other)
    assert (other.unlocks, other.total_runs, other.total_wins) == (0x001F, 4, 1)


def test_save_and_load_file(tmp_path):
    path = tmp_path / "cardbattle.sav"
    player = Player(unlocks=0x0019, total_runs=3, total_wins=2)
    save_game(player, path)
    assert path.stat().st_size == SAVE_SIZE
    loaded = Player()
    result = load_game(loaded, path)
    assert (loaded.unlocks, loaded.total_runs, loaded.total_wins) == (0x0019, 3, 2)
    assert result.unlocks == 0x0019


def test_load_missing_file(tmp_path):
    player = Player()
    with pytest.raises(SaveError):
        load_game(player, tmp_path / "absent.sav")
    assert player.unlocks == 0x0007


def test_load_corrupt_file_leaves_player(tmp_path):
    path = tmp_path / "bad.sav"
    path.write_bytes(bytes(SAVE_SIZE))
    player = Player(total_runs=9)
    with pytest.raises(SaveError):
        load_game(player, path)
    assert player.total_runs == 9
# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import pytest

from companion.services.sound_controller import SoundController


@pytest.fixture
def sounds(players):
    return SoundController(players)


def test_toggle_starts_at_half_volume(sounds, players):
    assert sounds.toggle("forest") is True

    assert sounds.is_playing("forest")
    assert players["forest"].playing
    assert players["forest"].volume == 0.5


def test_toggle_twice_stops(sounds, players):
    sounds.toggle("rain")
    assert sounds.toggle("rain") is False

    assert sounds.current is None
    assert not players["rain"].playing


def test_starting_one_sound_stops_the_others(sounds, players):
    sounds.toggle("forest")
    sounds.toggle("wave")

    assert sounds.playing == {"forest": False, "wave": True, "rain": False}
    assert not players["forest"].playing
    assert players["wave"].playing


def test_failed_start_reverts_to_stopped(sounds, players):
    sounds.toggle("forest")
    players["wave"].fail = True

    assert sounds.toggle("wave") is False

    assert sounds.current is None
    assert sounds.playing == {"forest": False, "wave": False, "rain": False}
    assert not players["forest"].playing


def test_missing_player_stays_stopped(players):
    del players["rain"]
    sounds = SoundController(players)

    assert sounds.toggle("rain") is False
    assert not sounds.is_playing("rain")


def test_stop_all(sounds, players):
    sounds.toggle("wave")
    sounds.stop_all()

    assert sounds.current is None
    assert not any(player.playing for player in players.values())


def test_unknown_sound(sounds):
    with pytest.raises(ValueError):
        sounds.toggle("thunder")

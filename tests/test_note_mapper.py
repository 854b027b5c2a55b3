"""Tests for NoteDescriptor and NoteMapper."""

import math

import numpy as np
import pytest

from pitch_tuner.core import NoteDescriptor
from pitch_tuner.processing import NoteMapper


@pytest.fixture
def mapper():
    return NoteMapper()


class TestNoteDescriptor:
    def test_label_and_pitch_class(self):
        note = NoteDescriptor(name="C#", octave=3, frequency=138.59, cents=0.0, midi=49)
        assert note.label == "C#3"
        assert note.pitch_class == 1

    def test_to_dict(self):
        note = NoteDescriptor(name="A", octave=4, frequency=440.0, cents=0.0, midi=69)
        assert note.to_dict() == {
            "name": "A",
            "octave": 4,
            "frequency": 440.0,
            "cents": 0.0,
            "midi": 69,
            "label": "A4",
        }

    def test_midi_to_freq(self):
        assert NoteDescriptor.midi_to_freq(69) == 440.0
        assert NoteDescriptor.midi_to_freq(81) == 880.0
        assert NoteDescriptor.midi_to_freq(60) == pytest.approx(261.63, abs=0.01)

    def test_is_immutable(self):
        note = NoteDescriptor(name="A", octave=4, frequency=440.0, cents=0.0, midi=69)
        with pytest.raises(AttributeError):
            note.cents = 3.0


class TestNoteMapper:
    def test_a4(self, mapper):
        note = mapper.map(440.0)
        assert note.name == "A"
        assert note.octave == 4
        assert note.midi == 69
        assert note.frequency == 440.0
        assert note.cents == pytest.approx(0.0, abs=1e-9)

    def test_a_sharp_4(self, mapper):
        note = mapper.map(466.16)
        assert note.label == "A#4"
        assert note.cents == pytest.approx(0.0, abs=0.1)

    @pytest.mark.parametrize(
        "freq,label,midi",
        [
            (82.41, "E2", 40),
            (110.0, "A2", 45),
            (246.94, "B3", 59),
            (261.63, "C4", 60),
            (329.63, "E4", 64),
            (523.25, "C5", 72),
        ],
    )
    def test_reference_notes(self, mapper, freq, label, midi):
        note = mapper.map(freq)
        assert note.label == label
        assert note.midi == midi

    def test_sharp_and_flat_offsets(self, mapper):
        assert mapper.map(445.0).cents == pytest.approx(19.56, abs=0.01)
        assert mapper.map(430.0).cents == pytest.approx(-39.80, abs=0.01)
        assert mapper.map(430.0).label == "A4"

    def test_cents_invariant(self, mapper):
        for freq in np.geomspace(20.0, 5000.0, 200):
            note = mapper.map(freq)
            rebuilt = mapper.midi_to_freq(note.midi) * 2 ** (note.cents / 1200)
            assert rebuilt == pytest.approx(freq, rel=1e-9)

    def test_cents_stay_within_half_semitone(self, mapper):
        for freq in np.geomspace(20.0, 5000.0, 500):
            cents = mapper.map(freq).cents
            assert -50.0 - 1e-9 <= cents < 50.0 + 1e-9

    def test_remapping_is_stable(self, mapper):
        first = mapper.map(437.3)
        second = mapper.map(first.frequency)
        assert second == first

    def test_negative_midi_has_valid_pitch_class(self, mapper):
        note = mapper.map(5.0)
        assert note.midi == -9
        assert note.name == "D#"
        assert note.octave == -2

    def test_very_low_frequencies_map_cleanly(self, mapper):
        for freq in np.geomspace(0.5, 20.0, 100):
            note = mapper.map(freq)
            assert 0 <= note.pitch_class < 12
            assert note.name == mapper.map(freq * 2).name

    def test_custom_reference_pitch(self):
        mapper = NoteMapper(a4=442.0)
        assert mapper.map(442.0).cents == pytest.approx(0.0, abs=1e-9)
        assert mapper.map(440.0).cents == pytest.approx(-7.85, abs=0.01)

    @pytest.mark.parametrize("freq", [0.0, -440.0, math.nan, math.inf])
    def test_invalid_frequency(self, mapper, freq):
        with pytest.raises(ValueError):
            mapper.map(freq)

    def test_invalid_reference(self):
        with pytest.raises(ValueError):
            NoteMapper(a4=0.0)

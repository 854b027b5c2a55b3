"""Tests for the file loader, the display and the CLI."""

import json

import numpy as np
import pytest
import soundfile as sf
from typer.testing import CliRunner

from pitch_tuner.cli import app
from pitch_tuner.core import NoteDescriptor
from pitch_tuner.input import AudioLoader
from pitch_tuner.output import TunerDisplay, TuningStatus

from conftest import SR, generate_sine_wave

runner = CliRunner()


@pytest.fixture
def tone_file(tmp_path):
    """One second of a 440 Hz tone."""
    path = tmp_path / "tone.wav"
    sf.write(str(path), generate_sine_wave(440.0, n_samples=SR), SR)
    return path


@pytest.fixture
def quiet_file(tmp_path):
    """A 440 Hz tone below the silence gate."""
    path = tmp_path / "quiet.wav"
    sf.write(str(path), generate_sine_wave(440.0, n_samples=SR, amplitude=0.005), SR)
    return path


@pytest.fixture
def silent_file(tmp_path):
    path = tmp_path / "silent.wav"
    sf.write(str(path), np.zeros(SR // 2, dtype=np.float32), SR)
    return path


class TestAudioLoader:
    def test_load_keeps_native_rate(self, tone_file):
        audio, sr = AudioLoader().load(str(tone_file))
        assert sr == SR
        assert len(audio) == SR

    def test_load_resamples(self, tone_file):
        audio, sr = AudioLoader(target_sr=22050).load(str(tone_file))
        assert sr == 22050
        assert len(audio) == pytest.approx(22050, abs=2)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AudioLoader().load(str(tmp_path / "missing.wav"))

    def test_unsupported_format(self, tmp_path):
        dummy_file = tmp_path / "test.xyz"
        dummy_file.write_text("dummy content")

        with pytest.raises(ValueError, match="Unsupported format"):
            AudioLoader().load(str(dummy_file))

    def test_load_normalized(self, tone_file):
        audio, _ = AudioLoader(normalize=True).load(str(tone_file))
        assert np.abs(audio).max() == pytest.approx(1.0)

    def test_count_frames_rejects_zero_size(self):
        with pytest.raises(ValueError, match="frame_size"):
            AudioLoader().count_frames(np.zeros(100), 0)

    def test_frames_drop_partial_tail(self):
        loader = AudioLoader()
        audio = np.arange(10000, dtype=float)
        frames = list(loader.frames(audio, frame_size=2048))

        assert [start for start, _ in frames] == [0, 2048, 4096, 6144]
        assert all(len(frame) == 2048 for _, frame in frames)
        assert loader.count_frames(audio, 2048) == 4

    def test_frames_with_hop(self):
        loader = AudioLoader()
        audio = np.zeros(10000)

        assert len(list(loader.frames(audio, 2048, hop_length=1024))) == 8
        assert loader.count_frames(audio, 2048, hop_length=1024) == 8

    def test_short_audio_has_no_frames(self):
        loader = AudioLoader()
        assert list(loader.frames(np.zeros(100), 2048)) == []
        assert loader.count_frames(np.zeros(100), 2048) == 0


class TestTunerDisplay:
    @pytest.fixture
    def display(self):
        return TunerDisplay()

    def test_status(self, display):
        assert display.status(0.0) is TuningStatus.IN_TUNE
        assert display.status(4.9) is TuningStatus.IN_TUNE
        assert display.status(-5.0) is TuningStatus.FLAT
        assert display.status(5.0) is TuningStatus.SHARP

    def test_needle_is_clamped(self, display):
        assert display.needle_position(0.0) == 20
        assert display.needle_position(-50.0) == 0
        assert display.needle_position(-80.0) == 0
        assert display.needle_position(50.0) == 40
        assert display.needle_position(120.0) == 40
        assert display.needle_position(25.0) == 30

    def test_needle_string(self, display):
        needle = display.needle(0.0)
        assert len(needle) == 41
        assert needle[20] == "v"

    def test_render(self, display):
        note = NoteDescriptor(name="A", octave=4, frequency=440.0, cents=1.0, midi=69)
        text = display.render(note).plain

        assert "A4" in text
        assert "440.00 Hz" in text
        assert "in tune" in text

    def test_render_without_note(self, display):
        assert display.render(None).plain == "-"

    def test_readings_table(self, display):
        note = NoteDescriptor(name="E", octave=2, frequency=80.0, cents=-51.0, midi=40)
        table = display.readings_table([(0.0, note), (0.1, note)])
        assert table.row_count == 2


class TestCLI:
    def test_note(self):
        result = runner.invoke(app, ["note", "440"])
        assert result.exit_code == 0
        assert "A4" in result.stdout
        assert "MIDI: 69" in result.stdout

    def test_note_custom_reference(self):
        result = runner.invoke(app, ["note", "442", "--a4", "442"])
        assert result.exit_code == 0
        assert "in tune" in result.stdout

    def test_note_invalid_frequency(self):
        result = runner.invoke(app, ["note", "0"])
        assert result.exit_code == 1

    def test_analyze(self, tone_file):
        result = runner.invoke(app, ["analyze", str(tone_file)])
        assert result.exit_code == 0
        assert "A4" in result.stdout

    def test_analyze_json(self, tone_file):
        result = runner.invoke(app, ["analyze", str(tone_file), "-d", "yin", "--json"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["sample_rate"] == SR
        assert data["config"]["detector"] == "yin"
        assert data["frames"] == SR // 2048
        assert data["voiced_frames"] == data["frames"]
        assert {r["label"] for r in data["readings"]} == {"A4"}

    def test_analyze_silence(self, silent_file):
        result = runner.invoke(app, ["analyze", str(silent_file)])
        assert result.exit_code == 0
        assert "No pitch detected" in result.stdout

    def test_analyze_with_config_file(self, tone_file, tmp_path):
        config_path = tmp_path / "tuner.json"
        config_path.write_text(json.dumps({"detector": "yin", "smoothing_window": 3}))

        result = runner.invoke(
            app, ["analyze", str(tone_file), "--config", str(config_path), "--json"]
        )
        assert result.exit_code == 0
        config = json.loads(result.stdout)["config"]
        assert config["detector"] == "yin"
        assert config["smoothing_window"] == 3

    def test_analyze_unknown_detector(self, tone_file):
        result = runner.invoke(app, ["analyze", str(tone_file), "-d", "fft"])
        assert result.exit_code == 1

    def test_analyze_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "missing.wav")])
        assert result.exit_code == 1

    def test_analyze_normalize_lifts_quiet_take(self, quiet_file):
        plain = runner.invoke(app, ["analyze", str(quiet_file), "--json"])
        assert json.loads(plain.stdout)["voiced_frames"] == 0

        result = runner.invoke(app, ["analyze", str(quiet_file), "--normalize", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["voiced_frames"] == data["frames"]
        assert {r["label"] for r in data["readings"]} == {"A4"}

    def test_info(self, tone_file):
        result = runner.invoke(app, ["info", str(tone_file)])
        assert result.exit_code == 0
        assert "Sample rate: 44100 Hz" in result.stdout
        assert "Frames of 2048: 21" in result.stdout

    def test_info_rejects_zero_buffer_size(self, tone_file):
        result = runner.invoke(app, ["info", str(tone_file), "-b", "0"])
        # Usage error from option validation, not a crash
        assert result.exit_code == 2
        assert not isinstance(result.exception, ZeroDivisionError)

import mido
import pretty_midi
import pytest

from ustx_pitch.midi_export import pitch_to_pitch_bends, write_pitch_midi
from ustx_pitch.types import Pitch


def test_pitch_bends_times_and_values() -> None:
    inst = pretty_midi.Instrument(program=0)
    pitch = Pitch(data=((0, 0.0), (480, 1.0), (960, 1.0), (1440, None), (1920, -2.0)))
    bends = pitch_to_pitch_bends(pitch, inst, 120.0)
    assert [b.pitch for b in bends] == [0, 4096, -8191]
    assert [b.time for b in bends] == pytest.approx([0.0, 0.5, 2.0])
    assert inst.pitch_bends == bends


def test_out_of_range_clipped(caplog) -> None:
    inst = pretty_midi.Instrument(program=0)
    with caplog.at_level("WARNING"):
        bends = pitch_to_pitch_bends(Pitch(data=((0, 5.0),)), inst, 120.0)
    assert bends[0].pitch == 8191
    assert "clipped" in caplog.text


def test_negative_ticks_clamped() -> None:
    inst = pretty_midi.Instrument(program=0)
    bends = pitch_to_pitch_bends(Pitch(data=((-100, 0.5),)), inst, 120.0)
    assert bends[0].time == 0.0


def test_absolute_pitch_rejected() -> None:
    inst = pretty_midi.Instrument(program=0)
    with pytest.raises(ValueError):
        pitch_to_pitch_bends(Pitch(data=((0, 60.0),), is_absolute=True), inst, 120.0)


def test_write_pitch_midi(tmp_path) -> None:
    out = tmp_path / "pitch.mid"
    pitch = Pitch(data=((0, 0.0), (480, 1.0), (960, 0.0)))
    write_pitch_midi(pitch, str(out), 120.0)
    assert out.exists()
    # pretty_midi drops bends on a track without notes when reading, so use mido
    msgs = [m for track in mido.MidiFile(str(out)).tracks for m in track]
    bends = [m for m in msgs if m.type == "pitchwheel"]
    assert [m.pitch for m in bends] == [0, 4096, 0]

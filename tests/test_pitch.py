import pytest

import harmonic_delay.constants.notes
import harmonic_delay.pitch


PITCH_CLASSES = harmonic_delay.constants.notes.PITCH_CLASSES


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def test_pitch_class_table () -> None:

	assert len(PITCH_CLASSES) == 12
	assert len(set(PITCH_CLASSES)) == 12


def test_musical_notes_are_equal_tempered () -> None:

	"""Each note is a semitone above the previous one, within the 2-decimal rounding of the table."""

	notes = harmonic_delay.constants.notes.MUSICAL_NOTES

	assert len(notes) == 24
	assert notes[0].name == "C3"
	assert notes[-1].name == "B4"

	for lower, upper in zip(notes, notes[1:]):
		assert upper.frequency > lower.frequency
		assert upper.frequency / lower.frequency == pytest.approx(2 ** (1 / 12), rel=2e-4)


# ---------------------------------------------------------------------------
# Note lookup
# ---------------------------------------------------------------------------

def test_note_index_normalises_flats_enharmonically () -> None:

	"""Db is the same key as C#, not D#."""

	assert harmonic_delay.pitch.note_index("Db") == 1
	assert harmonic_delay.pitch.note_index("Bb") == 10
	assert harmonic_delay.pitch.note_index("C#") == 1


def test_note_index_ignores_octave () -> None:

	assert harmonic_delay.pitch.note_index("F#4") == 6
	assert harmonic_delay.pitch.note_index("A#3/Bb3") == 10


@pytest.mark.parametrize("name", ["Cb", "Fb", "E#", "B#", "Dbb", "H", "", "C#x"])
def test_spellings_without_a_table_entry_are_unknown (name: str) -> None:

	assert harmonic_delay.pitch.note_index(name) is None
	assert harmonic_delay.pitch.transpose_note(name, 0) is None


def test_pitch_class_index_raises_for_unknown_names () -> None:

	with pytest.raises(harmonic_delay.pitch.UnknownKey):
		harmonic_delay.pitch.pitch_class_index("Cb")

	with pytest.raises(KeyError):
		harmonic_delay.pitch.pitch_class_index("Q")

	assert harmonic_delay.pitch.pitch_class_index("G") == 7


def test_pitch_class_of () -> None:

	assert harmonic_delay.pitch.pitch_class_of("f#4") == "F#"
	assert harmonic_delay.pitch.pitch_class_of("D#3/Eb3") == "D#"
	assert harmonic_delay.pitch.pitch_class_of("H2") is None
	assert harmonic_delay.pitch.pitch_class_of(None) is None


def test_find_note () -> None:

	assert harmonic_delay.pitch.find_note("Db3").name == "C#3/Db3"
	assert harmonic_delay.pitch.find_note("A4").frequency == 440.0
	assert harmonic_delay.pitch.find_note("C5") is None


# ---------------------------------------------------------------------------
# Transposition
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", PITCH_CLASSES)
def test_transpose_identity_and_octave_wrap (name: str) -> None:

	assert harmonic_delay.pitch.transpose_note(name, 0) == name
	assert harmonic_delay.pitch.transpose_note(name, 12) == name
	assert harmonic_delay.pitch.transpose_note(name, -24) == name


def test_transpose_wraps_both_directions () -> None:

	assert harmonic_delay.pitch.transpose_note("B", 1) == "C"
	assert harmonic_delay.pitch.transpose_note("C", -1) == "B"
	assert harmonic_delay.pitch.transpose_note("A", 3) == "C"
	assert harmonic_delay.pitch.transpose_note("Eb", 12) == "D#"


def test_interval_between () -> None:

	assert harmonic_delay.pitch.interval_between("C", "G") == 7
	assert harmonic_delay.pitch.interval_between("G", "C") == 5
	assert harmonic_delay.pitch.interval_between("C", "Cb") is None


# ---------------------------------------------------------------------------
# Scales
# ---------------------------------------------------------------------------

def test_c_major_and_a_minor () -> None:

	assert harmonic_delay.pitch.generate_scale("C", "Major") == ["C", "D", "E", "F", "G", "A", "B"]
	assert harmonic_delay.pitch.generate_scale("A", harmonic_delay.pitch.ScaleMode.MINOR) == ["A", "B", "C", "D", "E", "F", "G"]


def test_mode_names_are_case_insensitive () -> None:

	assert harmonic_delay.pitch.generate_scale("D", "dorian") == ["D", "E", "F", "G", "A", "B", "C"]
	assert harmonic_delay.pitch.generate_scale("E", "PHRYGIAN") == ["E", "F", "G", "A", "B", "C", "D"]


@pytest.mark.parametrize("root", PITCH_CLASSES)
def test_major_scale_has_seven_distinct_notes (root: str) -> None:

	scale = harmonic_delay.pitch.generate_scale(root, "Major")

	assert len(scale) == 7
	assert len(set(scale)) == 7
	assert scale[0] == root


def test_scale_from_flat_root () -> None:

	assert harmonic_delay.pitch.generate_scale("Bb", "Major") == ["A#", "C", "D", "D#", "F", "G", "A"]


def test_unknown_scale_inputs_give_empty_list () -> None:

	assert harmonic_delay.pitch.generate_scale("H", "Major") == []
	assert harmonic_delay.pitch.generate_scale("C", "Bebop") == []


def test_scale_steps_match_whole_half_patterns () -> None:

	"""The absolute patterns agree with the usual whole/half step spellings."""

	expected = {
		"Major": [2, 2, 1, 2, 2, 2, 1],
		"Minor": [2, 1, 2, 2, 1, 2, 2],
		"Dorian": [2, 1, 2, 2, 2, 1, 2],
		"Phrygian": [1, 2, 2, 2, 1, 2, 2],
		"Lydian": [2, 2, 2, 1, 2, 2, 1],
		"Mixolydian": [2, 2, 1, 2, 2, 1, 2],
		"Locrian": [1, 2, 2, 1, 2, 2, 2],
	}

	for mode, steps in expected.items():
		assert harmonic_delay.pitch.scale_steps(mode) == steps
		assert sum(steps) == 12

	assert harmonic_delay.pitch.scale_steps("Bebop") == []


# ---------------------------------------------------------------------------
# Chords
# ---------------------------------------------------------------------------

def test_c_chords () -> None:

	assert harmonic_delay.pitch.generate_chord("C", "major") == ["C", "E", "G"]
	assert harmonic_delay.pitch.generate_chord("C", "min7") == ["C", "D#", "G", "A#"]
	assert harmonic_delay.pitch.generate_chord("C", "dim") == ["C", "D#", "F#"]
	assert harmonic_delay.pitch.generate_chord("C", "aug") == ["C", "E", "G#"]
	assert harmonic_delay.pitch.generate_chord("C", "sus4") == ["C", "F", "G"]


def test_chord_wraps_past_b () -> None:

	assert harmonic_delay.pitch.generate_chord("Bb", "dom7") == ["A#", "D", "F", "G#"]
	assert harmonic_delay.pitch.generate_chord("A", harmonic_delay.pitch.ChordType.MAJOR_7TH) == ["A", "C#", "E", "G#"]


def test_every_chord_type_has_three_or_four_notes () -> None:

	for kind in harmonic_delay.pitch.ChordType:
		chord = harmonic_delay.pitch.generate_chord("G", kind)
		assert 3 <= len(chord) <= 4
		assert chord[0] == "G"


def test_unknown_chord_inputs_give_empty_list () -> None:

	assert harmonic_delay.pitch.generate_chord("C", "add9") == []
	assert harmonic_delay.pitch.generate_chord("Fb", "major") == []


# ---------------------------------------------------------------------------
# Frequencies
# ---------------------------------------------------------------------------

def test_note_to_frequency () -> None:

	assert harmonic_delay.pitch.note_to_frequency("A") == 440.0
	assert harmonic_delay.pitch.note_to_frequency("C") == 261.63
	assert harmonic_delay.pitch.note_to_frequency("C#4/Db4") == 277.18


def test_sharp_and_flat_spellings_share_a_frequency () -> None:

	for flat, sharp in harmonic_delay.constants.notes.FLAT_TO_SHARP.items():
		assert harmonic_delay.pitch.note_to_frequency(flat) == harmonic_delay.pitch.note_to_frequency(sharp)


def test_note_to_frequency_ignores_octave () -> None:

	assert harmonic_delay.pitch.note_to_frequency("Db2") == 277.18


def test_unmapped_names_give_not_available () -> None:

	assert harmonic_delay.pitch.note_to_frequency("X") == "N/A"
	assert harmonic_delay.pitch.note_to_frequency("Cb") == "N/A"

"""Pitch class theory: transposition, scales, chords and note frequencies.

All operations work on the 12 canonical pitch class names in
``harmonic_delay.constants.notes.PITCH_CLASSES`` and reduce modulo 12, so
results carry no octave information.

Unknown note names, modes and chord types never raise here: they produce an
empty list, ``None`` or ``"N/A"``.  Use :func:`pitch_class_index` when a
hard failure is wanted.

Flat spellings are accepted where they have a sharp twin in the table
(``Db``, ``Eb``, ``Gb``, ``Ab``, ``Bb``).  Other enharmonic spellings
(``Cb``, ``Fb``, ``E#``, ``B#``, double accidentals) are treated as unknown.

Example:
	```python
	import harmonic_delay.pitch

	harmonic_delay.pitch.generate_scale("D", "Dorian")   # → ['D', 'E', 'F', 'G', 'A', 'B', 'C']
	harmonic_delay.pitch.generate_chord("C", "min7")     # → ['C', 'D#', 'G', 'A#']
	harmonic_delay.pitch.transpose_note("A", 3)          # → 'C'
	```
"""

import enum
import logging
import re
import typing

import harmonic_delay.constants.notes


logger = logging.getLogger(__name__)


class UnknownKey (KeyError):

	"""
	Raised by strict lookups when a name is not a known pitch class.
	"""


class ScaleMode (str, enum.Enum):

	MAJOR = "Major"
	MINOR = "Minor"
	DORIAN = "Dorian"
	PHRYGIAN = "Phrygian"
	LYDIAN = "Lydian"
	MIXOLYDIAN = "Mixolydian"
	LOCRIAN = "Locrian"


class ChordType (str, enum.Enum):

	MAJOR = "major"
	MINOR = "minor"
	DIMINISHED = "dim"
	AUGMENTED = "aug"
	MAJOR_7TH = "maj7"
	MINOR_7TH = "min7"
	DOMINANT_7TH = "dom7"
	SUS2 = "sus2"
	SUS4 = "sus4"


SCALE_INTERVALS: typing.Dict[ScaleMode, typing.List[int]] = {
	ScaleMode.MAJOR: [0, 2, 4, 5, 7, 9, 11],
	ScaleMode.MINOR: [0, 2, 3, 5, 7, 8, 10],
	ScaleMode.DORIAN: [0, 2, 3, 5, 7, 9, 10],
	ScaleMode.PHRYGIAN: [0, 1, 3, 5, 7, 8, 10],
	ScaleMode.LYDIAN: [0, 2, 4, 6, 7, 9, 11],
	ScaleMode.MIXOLYDIAN: [0, 2, 4, 5, 7, 9, 10],
	ScaleMode.LOCRIAN: [0, 1, 3, 5, 6, 8, 10],
}

CHORD_INTERVALS: typing.Dict[ChordType, typing.List[int]] = {
	ChordType.MAJOR: [0, 4, 7],
	ChordType.MINOR: [0, 3, 7],
	ChordType.DIMINISHED: [0, 3, 6],
	ChordType.AUGMENTED: [0, 4, 8],
	ChordType.MAJOR_7TH: [0, 4, 7, 11],
	ChordType.MINOR_7TH: [0, 3, 7, 10],
	ChordType.DOMINANT_7TH: [0, 4, 7, 10],
	ChordType.SUS2: [0, 2, 7],
	ChordType.SUS4: [0, 5, 7],
}

# Letter, optional accidentals, optional octave number.
_NOTE_NAME_PATTERN = re.compile(r"^([A-Ga-g])([#b]*)(-?\d+)?$")


def pitch_class_of (note_name: str) -> typing.Optional[str]:

	"""Strip the octave from a note name, keeping letter and accidentals.

	Combined enharmonic names (``"C#3/Db3"``) resolve to their first
	spelling.  Returns ``None`` if the name is not note-shaped.

	Example:
		```python
		pitch_class_of("F#4")       # → "F#"
		pitch_class_of("A#3/Bb3")   # → "A#"
		pitch_class_of("H2")        # → None
		```
	"""

	if not isinstance(note_name, str):
		return None

	first = note_name.split("/")[0].strip()
	match = _NOTE_NAME_PATTERN.match(first)

	if match is None:
		return None

	letter, accidentals, _ = match.groups()

	return letter.upper() + accidentals


def note_index (name: str) -> typing.Optional[int]:

	"""Return the table index (0-11) of a pitch class name, or ``None``.

	Flats with a sharp twin are normalised first (``"Bb"`` → ``"A#"``).
	Octave numbers are ignored.
	"""

	pitch_class = pitch_class_of(name)

	if pitch_class is None:
		return None

	pitch_class = harmonic_delay.constants.notes.FLAT_TO_SHARP.get(pitch_class, pitch_class)

	try:
		return harmonic_delay.constants.notes.PITCH_CLASSES.index(pitch_class)
	except ValueError:
		logger.debug(f"No pitch class for spelling {name!r}")
		return None


def pitch_class_index (name: str) -> int:

	"""Strict form of :func:`note_index`.

	Raises:
		UnknownKey: If ``name`` is not a known pitch class.
	"""

	index = note_index(name)

	if index is None:
		raise UnknownKey(name)

	return index


def transpose_note (root: str, semitones: int) -> typing.Optional[str]:

	"""Move a pitch class by a number of semitones, wrapping at the octave.

	Returns ``None`` when ``root`` is not a known pitch class.

	Example:
		```python
		transpose_note("B", 1)     # → "C"
		transpose_note("C", -1)    # → "B"
		transpose_note("Eb", 12)   # → "D#"
		```
	"""

	index = note_index(root)

	if index is None:
		return None

	return harmonic_delay.constants.notes.PITCH_CLASSES[(index + int(semitones)) % 12]


def interval_between (lower: str, upper: str) -> typing.Optional[int]:

	"""
	Return the upward distance in semitones (0-11) from ``lower`` to ``upper``, or ``None`` if either is unknown.
	"""

	lower_index = note_index(lower)
	upper_index = note_index(upper)

	if lower_index is None or upper_index is None:
		return None

	return (upper_index - lower_index) % 12


def _coerce_mode (mode: typing.Union[str, ScaleMode]) -> typing.Optional[ScaleMode]:

	if isinstance(mode, ScaleMode):
		return mode

	for member in ScaleMode:
		if isinstance(mode, str) and member.value.lower() == mode.strip().lower():
			return member

	return None


def _coerce_chord_type (chord_type: typing.Union[str, ChordType]) -> typing.Optional[ChordType]:

	if isinstance(chord_type, ChordType):
		return chord_type

	try:
		return ChordType(chord_type)
	except ValueError:
		return None


def _apply_pattern (root: str, pattern: typing.Sequence[int]) -> typing.List[str]:

	return [typing.cast(str, transpose_note(root, offset)) for offset in pattern]


def generate_scale (root: str, mode: typing.Union[str, ScaleMode]) -> typing.List[str]:

	"""Return the seven pitch classes of a scale, starting from the root.

	Parameters:
		root: Root pitch class (e.g. ``"C"``, ``"F#"``, ``"Bb"``).
		mode: A ``ScaleMode`` or its name, matched case-insensitively
			(``"Major"``, ``"dorian"``, ...).

	Returns:
		Seven pitch class names, or an empty list if the root or mode is unknown.
	"""

	scale_mode = _coerce_mode(mode)

	if scale_mode is None or note_index(root) is None:
		logger.debug(f"Cannot build scale for root {root!r} mode {mode!r}")
		return []

	return _apply_pattern(root, SCALE_INTERVALS[scale_mode])


def scale_steps (mode: typing.Union[str, ScaleMode]) -> typing.List[int]:

	"""Return a scale as successive whole/half steps (summing to 12).

	Example:
		```python
		scale_steps("Major")   # → [2, 2, 1, 2, 2, 2, 1]
		```
	"""

	scale_mode = _coerce_mode(mode)

	if scale_mode is None:
		return []

	degrees = SCALE_INTERVALS[scale_mode] + [12]

	return [upper - lower for lower, upper in zip(degrees, degrees[1:])]


def generate_chord (root: str, chord_type: typing.Union[str, ChordType]) -> typing.List[str]:

	"""Return the pitch classes of a chord, root first.

	Parameters:
		root: Root pitch class.
		chord_type: A ``ChordType`` or one of ``"major"``, ``"minor"``,
			``"dim"``, ``"aug"``, ``"maj7"``, ``"min7"``, ``"dom7"``,
			``"sus2"``, ``"sus4"``.

	Returns:
		Three or four pitch class names, or an empty list if the root or chord
		type is unknown.
	"""

	kind = _coerce_chord_type(chord_type)

	if kind is None or note_index(root) is None:
		logger.debug(f"Cannot build chord for root {root!r} type {chord_type!r}")
		return []

	return _apply_pattern(root, CHORD_INTERVALS[kind])


def note_to_frequency (name: str) -> typing.Union[float, str]:

	"""Return the octave-4 frequency of a note name, or ``"N/A"``.

	Octave numbers in ``name`` are ignored; sharp and flat spellings of the
	same key give the same frequency.

	Example:
		```python
		note_to_frequency("A")        # → 440.0
		note_to_frequency("Db2")      # → 277.18
		note_to_frequency("X")        # → "N/A"
		```
	"""

	pitch_class = pitch_class_of(name)

	frequencies = harmonic_delay.constants.notes.PITCH_CLASS_FREQUENCIES

	if pitch_class is None or pitch_class not in frequencies:
		return harmonic_delay.constants.notes.NOT_AVAILABLE

	return frequencies[pitch_class]


def find_note (name: str) -> typing.Optional[harmonic_delay.constants.notes.MusicalNote]:

	"""Look up a root note from ``MUSICAL_NOTES`` by name.

	Either the full table name (``"C#3/Db3"``) or one of its spellings
	(``"Db3"``) is accepted.
	"""

	if not isinstance(name, str):
		return None

	wanted = name.strip()

	for note in harmonic_delay.constants.notes.MUSICAL_NOTES:
		if wanted == note.name or wanted in note.name.split("/"):
			return note

	return None

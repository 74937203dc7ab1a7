"""Note and pitch class tables.

``PITCH_CLASSES`` is the canonical 12-name table (sharp spellings).  Every
pitch class operation reduces to an index into it, modulo 12.

``MUSICAL_NOTES`` is the ordered list of root notes a user can pick, from C3
to B4.  Enharmonic keys carry both spellings, e.g. ``"C#3/Db3"``.  The
frequencies are equal-tempered (A4 = 440 Hz) rounded to 2 decimal places.

``PITCH_CLASS_FREQUENCIES`` maps bare note names (sharp and flat) to the
frequency of that note in octave 4.
"""

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class MusicalNote:

	"""
	A named note with its frequency in Hz.
	"""

	name: str
	frequency: float


PITCH_CLASSES: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

# Flat spellings that have a sharp twin in PITCH_CLASSES.
FLAT_TO_SHARP: typing.Dict[str, str] = {
	"Db": "C#",
	"Eb": "D#",
	"Gb": "F#",
	"Ab": "G#",
	"Bb": "A#",
}

MUSICAL_NOTES: typing.List[MusicalNote] = [
	MusicalNote("C3", 130.81),
	MusicalNote("C#3/Db3", 138.59),
	MusicalNote("D3", 146.83),
	MusicalNote("D#3/Eb3", 155.56),
	MusicalNote("E3", 164.81),
	MusicalNote("F3", 174.61),
	MusicalNote("F#3/Gb3", 185.00),
	MusicalNote("G3", 196.00),
	MusicalNote("G#3/Ab3", 207.65),
	MusicalNote("A3", 220.00),
	MusicalNote("A#3/Bb3", 233.08),
	MusicalNote("B3", 246.94),
	MusicalNote("C4", 261.63),
	MusicalNote("C#4/Db4", 277.18),
	MusicalNote("D4", 293.66),
	MusicalNote("D#4/Eb4", 311.13),
	MusicalNote("E4", 329.63),
	MusicalNote("F4", 349.23),
	MusicalNote("F#4/Gb4", 369.99),
	MusicalNote("G4", 392.00),
	MusicalNote("G#4/Ab4", 415.30),
	MusicalNote("A4", 440.00),
	MusicalNote("A#4/Bb4", 466.16),
	MusicalNote("B4", 493.88),
]

PITCH_CLASS_FREQUENCIES: typing.Dict[str, float] = {
	"C": 261.63,
	"C#": 277.18,
	"Db": 277.18,
	"D": 293.66,
	"D#": 311.13,
	"Eb": 311.13,
	"E": 329.63,
	"F": 349.23,
	"F#": 369.99,
	"Gb": 369.99,
	"G": 392.00,
	"G#": 415.30,
	"Ab": 415.30,
	"A": 440.00,
	"A#": 466.16,
	"Bb": 466.16,
	"B": 493.88,
}

# Returned by lookups that have no frequency for a name.
NOT_AVAILABLE = "N/A"

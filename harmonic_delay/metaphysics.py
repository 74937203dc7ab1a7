"""Decorative note classifications.

Maps a note to a chakra, a colour and a short energy description, and
reduces calculated values to a single numerological digit.  None of this
feeds back into the timing calculation.

The lookup uses the bare letter of the note: ``"C#4"`` and ``"Cb"`` both
classify as ``"C"``.  A different table with the same shape can be passed to
:func:`classify_note`, e.g. one loaded from the ``chakra_map`` section of the
configuration file.
"""

import dataclasses
import logging
import typing


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class NoteClassification:

	chakra: str
	color: str
	energy: str

	def describe (self) -> str:

		"""Return a one-line summary, e.g. ``"Heart (Green): Love, compassion"``."""

		return f"{self.chakra} ({self.color}): {self.energy}"


UNKNOWN_CLASSIFICATION = NoteClassification("Unknown", "Unknown", "Unknown")

CHAKRA_MAP: typing.Dict[str, NoteClassification] = {
	"C": NoteClassification("Root", "Red", "Grounding, stability"),
	"D": NoteClassification("Sacral", "Orange", "Creativity, emotion"),
	"E": NoteClassification("Solar Plexus", "Yellow", "Personal power, will"),
	"F": NoteClassification("Heart", "Green", "Love, compassion"),
	"G": NoteClassification("Throat", "Blue", "Communication, expression"),
	"A": NoteClassification("Third Eye", "Indigo", "Intuition, insight"),
	"B": NoteClassification("Crown", "Violet", "Spirituality, connection"),
}

MASTER_NUMBERS = (11, 22, 33)


def chakra_map_from_config (config: typing.Dict[str, typing.Any]) -> typing.Dict[str, NoteClassification]:

	"""Build a classification table from configuration data.

	Expects a mapping of letters to mappings with ``chakra``, ``color`` and
	``energy`` keys::

		chakra_map:
		  C: {chakra: Root, color: Red, energy: Grounding}

	Raises:
		ValueError: If an entry is missing one of the keys.
	"""

	table: typing.Dict[str, NoteClassification] = {}

	for letter, entry in config.items():

		try:
			table[str(letter).strip().upper()] = NoteClassification(
				chakra = str(entry["chakra"]),
				color = str(entry["color"]),
				energy = str(entry["energy"]),
			)
		except (KeyError, TypeError) as e:
			raise ValueError(f"Invalid chakra_map entry for {letter!r}: {e}") from e

	logger.info(f"Loaded chakra map with {len(table)} entries")

	return table


def classify_note (name: str, table: typing.Optional[typing.Mapping[str, NoteClassification]] = None) -> NoteClassification:

	"""Return the classification for a note's letter.

	Parameters:
		name: Note name, with or without accidental and octave.
		table: Classification table keyed by upper-case letter. Defaults to
			``CHAKRA_MAP``.

	Returns:
		The matching ``NoteClassification``, or ``UNKNOWN_CLASSIFICATION``.

	Example:
		```python
		classify_note("F#3").chakra   # → "Heart"
		classify_note("").chakra      # → "Unknown"
		```
	"""

	if table is None:
		table = CHAKRA_MAP

	if not isinstance(name, str) or not name.strip():
		return UNKNOWN_CLASSIFICATION

	return table.get(name.strip()[0].upper(), UNKNOWN_CLASSIFICATION)


def is_master_number (number: int) -> bool:

	return number in MASTER_NUMBERS


def numerology_reduce (value: float) -> int:

	"""Reduce a value to a single digit by repeatedly summing its digits.

	The value is read to 2 decimal places, as displayed.  Reduction stops
	early at the master numbers 11, 22 and 33.

	Example:
		```python
		numerology_reduce(500.0)   # → 5
		numerology_reduce(1.91)    # → 11
		numerology_reduce(7.65)    # → 9   (7+6+5 = 18 → 9)
		```
	"""

	total = sum(int(ch) for ch in f"{abs(value):.2f}" if ch.isdigit())

	while total > 9 and not is_master_number(total):
		total = sum(int(ch) for ch in str(total))

	return total

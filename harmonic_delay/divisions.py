"""Beat-division and harmonic-multiplier resolution.

Turns the labels shown in the calculator ("dotted 1/8 note", "4x", ...) into
multiplier values.  Lookups are total: an unknown label resolves to a
documented default so the UI always has something to show.

Example:
	```python
	import harmonic_delay.divisions

	harmonic_delay.divisions.multiplier_from_label("1/8 note triplet")  # → 0.0833...
	harmonic_delay.divisions.multiplier_from_label("no such label")     # → 0.25
	harmonic_delay.divisions.label_from_index(11)                       # → "1/4 note"
	```
"""

import enum
import logging
import typing

import harmonic_delay.constants.beat_divisions


logger = logging.getLogger(__name__)


class BeatDivision (str, enum.Enum):

	"""
	Every entry of the beat-division table, in slider order.
	"""

	TIMES_64 = "64x"
	TIMES_32 = "32x"
	TIMES_16 = "16x"
	TIMES_8 = "8x"
	TIMES_4 = "4x"
	TIMES_2 = "2x"
	WHOLE = "1/1 note"
	DOTTED_HALF = "dotted 1/2 note"
	HALF = "1/2 note"
	HALF_TRIPLET = "1/2 note triplet"
	DOTTED_QUARTER = "dotted 1/4 note"
	QUARTER = "1/4 note"
	QUARTER_TRIPLET = "1/4 note triplet"
	DOTTED_EIGHTH = "dotted 1/8 note"
	EIGHTH = "1/8 note"
	EIGHTH_TRIPLET = "1/8 note triplet"
	DOTTED_SIXTEENTH = "dotted 1/16 note"
	SIXTEENTH = "1/16 note"
	SIXTEENTH_TRIPLET = "1/16 note triplet"
	DOTTED_THIRTYSECOND = "dotted 1/32 note"
	THIRTYSECOND = "1/32 note"
	THIRTYSECOND_TRIPLET = "1/32 note triplet"
	DOTTED_SIXTYFOURTH = "dotted 1/64 note"
	SIXTYFOURTH = "1/64 note"
	SIXTYFOURTH_TRIPLET = "1/64 note triplet"

	@property
	def multiplier (self) -> float:

		"""The multiplier value for this division."""

		return harmonic_delay.constants.beat_divisions.BEAT_DIVISION_VALUES[self.value]


def multiplier_from_label (label: typing.Union[str, BeatDivision]) -> float:

	"""Return the multiplier for a beat-division label.

	Unknown labels fall back to the "1/4 note" value (0.25) instead of
	raising.

	Parameters:
		label: A label such as ``"dotted 1/8 note"`` or a ``BeatDivision``.

	Returns:
		The multiplier value.
	"""

	if isinstance(label, BeatDivision):
		return label.multiplier

	values = harmonic_delay.constants.beat_divisions.BEAT_DIVISION_VALUES

	if label not in values:
		logger.debug(f"Unknown beat division {label!r}, using {harmonic_delay.constants.beat_divisions.DEFAULT_BEAT_DIVISION_LABEL!r}")
		return harmonic_delay.constants.beat_divisions.DEFAULT_MULTIPLIER

	return values[label]


def clamp_division_index (index: int) -> int:

	"""
	Clamp a slider index into the range of the beat-division table.
	"""

	last = len(harmonic_delay.constants.beat_divisions.BEAT_DIVISIONS) - 1

	return max(0, min(last, int(index)))


def label_from_index (index: int) -> str:

	"""
	Return the beat-division label at a (clamped) slider index.
	"""

	label, _ = harmonic_delay.constants.beat_divisions.BEAT_DIVISIONS[clamp_division_index(index)]

	return label


def multiplier_from_index (index: int) -> float:

	"""
	Return the multiplier at a (clamped) slider index.
	"""

	_, value = harmonic_delay.constants.beat_divisions.BEAT_DIVISIONS[clamp_division_index(index)]

	return value


def harmonic_multiplier (label: str) -> float:

	"""Return the value of a harmonic multiplier label such as ``"0.5x"``.

	Unknown labels fall back to ``"1x"``.
	"""

	values = dict(harmonic_delay.constants.beat_divisions.HARMONIC_MULTIPLIERS)

	if label not in values:
		logger.debug(f"Unknown harmonic multiplier {label!r}, using {harmonic_delay.constants.beat_divisions.DEFAULT_HARMONIC_MULTIPLIER!r}")
		return values[harmonic_delay.constants.beat_divisions.DEFAULT_HARMONIC_MULTIPLIER]

	return values[label]

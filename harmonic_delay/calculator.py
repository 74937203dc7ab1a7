"""Calculator form state and the single evaluation pipeline.

Defines :class:`CalculatorInputs` (an immutable snapshot of every form field)
and :func:`evaluate`, which turns one snapshot into everything the
presentation layer renders.  The UI keeps a ``CalculatorInputs``, replaces it
on each change, and calls ``evaluate()`` again; there is no other state.

Example:
	```python
	import harmonic_delay.calculator as calc

	inputs = calc.reset().replace(tempo=90, root_note="A3", beat_division_index=14)
	snapshot = calc.evaluate(inputs)
	snapshot.timing.delay_time
	```
"""

import dataclasses
import logging
import typing

import harmonic_delay.constants.beat_divisions
import harmonic_delay.constants.notes
import harmonic_delay.divisions
import harmonic_delay.metaphysics
import harmonic_delay.pitch
import harmonic_delay.timing


logger = logging.getLogger(__name__)

MIN_TEMPO = 30
MAX_TEMPO = 240
DEFAULT_TEMPO = 120

MIN_SEMITONES = -24
MAX_SEMITONES = 24

T = typing.TypeVar("T", int, float)


def clamp_tempo (tempo: float) -> float:

	return max(MIN_TEMPO, min(MAX_TEMPO, tempo))


def clamp_semitones (semitones: int) -> int:

	return max(MIN_SEMITONES, min(MAX_SEMITONES, int(semitones)))


def parse_number (text: str, previous: T) -> T:

	"""Parse a text field, keeping ``previous`` if the text is not a number.

	The result has the same type as ``previous``: integer fields truncate.

	Example:
		```python
		parse_number("96", 120)      # → 96
		parse_number("", 120)        # → 120
		parse_number("abc", 0.5)     # → 0.5
		```
	"""

	try:
		value = float(str(text).strip())
	except ValueError:
		logger.debug(f"Ignoring non-numeric input {text!r}")
		return previous

	if value != value or value in (float("inf"), float("-inf")):
		return previous

	return type(previous)(value)


@dataclasses.dataclass(frozen=True)
class CalculatorInputs:

	"""
	Every value the calculator form can set.

	Attributes:
		tempo: Tempo in BPM.
		root_note: Name of an entry in ``MUSICAL_NOTES`` (either the full
			``"C#3/Db3"`` form or one spelling).
		semitone_offset: Transposition of the root in semitones.
		beat_division_index: Position in the beat-division table (0-24).
		harmonic_multiplier: Label from the harmonic-multiplier table.
		use_harmonic_multiplier: When ``True``, the harmonic multiplier is
			used instead of the beat division.
	"""

	tempo: float = DEFAULT_TEMPO
	root_note: str = harmonic_delay.constants.notes.MUSICAL_NOTES[0].name
	semitone_offset: int = 0
	beat_division_index: int = harmonic_delay.constants.beat_divisions.DEFAULT_BEAT_DIVISION_INDEX
	harmonic_multiplier: str = harmonic_delay.constants.beat_divisions.DEFAULT_HARMONIC_MULTIPLIER
	use_harmonic_multiplier: bool = False

	def replace (self, **changes: typing.Any) -> "CalculatorInputs":

		"""Return a copy with some fields changed."""

		return dataclasses.replace(self, **changes)

	def clamped (self) -> "CalculatorInputs":

		"""Return a copy with tempo, semitone offset and division index held to their UI ranges.

		Raises:
			harmonic_delay.timing.InvalidParameter: If the semitone offset or
				division index is infinite or NaN.
		"""

		try:
			return self.replace(
				tempo = clamp_tempo(self.tempo),
				semitone_offset = clamp_semitones(self.semitone_offset),
				beat_division_index = harmonic_delay.divisions.clamp_division_index(self.beat_division_index),
			)
		except (OverflowError, ValueError) as e:
			raise harmonic_delay.timing.InvalidParameter(f"Cannot clamp inputs: {e}") from None

	@property
	def multiplier (self) -> float:

		"""The multiplier selected by the toggle."""

		if self.use_harmonic_multiplier:
			return harmonic_delay.divisions.harmonic_multiplier(self.harmonic_multiplier)

		return harmonic_delay.divisions.multiplier_from_index(self.beat_division_index)

	@property
	def multiplier_label (self) -> str:

		if self.use_harmonic_multiplier:
			return self.harmonic_multiplier

		return harmonic_delay.divisions.label_from_index(self.beat_division_index)


def reset () -> CalculatorInputs:

	"""
	Return the default form values.
	"""

	return CalculatorInputs()


@dataclasses.dataclass(frozen=True)
class CalculatorSnapshot:

	"""
	Everything the presentation layer shows for one set of inputs.
	"""

	inputs: CalculatorInputs
	root_frequency: float
	note: typing.Optional[str]
	multiplier: float
	timing: harmonic_delay.timing.TimingResult
	classification: harmonic_delay.metaphysics.NoteClassification
	numerology: int

	def as_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return a JSON-serialisable representation."""

		return {
			"inputs": dataclasses.asdict(self.inputs),
			"root_frequency": self.root_frequency,
			"note": self.note,
			"multiplier": self.multiplier,
			"multiplier_label": self.inputs.multiplier_label,
			"timing": dataclasses.asdict(self.timing),
			"classification": dataclasses.asdict(self.classification),
			"numerology": self.numerology,
			"master_number": harmonic_delay.metaphysics.is_master_number(self.numerology),
		}


def evaluate (
	inputs: CalculatorInputs,
	chakra_table: typing.Optional[typing.Mapping[str, harmonic_delay.metaphysics.NoteClassification]] = None
) -> CalculatorSnapshot:

	"""Run the whole calculation for one set of form values.

	Parameters:
		inputs: The form values. They are used as given; call
			``inputs.clamped()`` first to apply the UI ranges.
		chakra_table: Optional replacement classification table.

	Returns:
		A ``CalculatorSnapshot``.

	Raises:
		harmonic_delay.timing.InvalidParameter: If the root note is not in
			the note table, or the tempo is not positive.
	"""

	root = harmonic_delay.pitch.find_note(inputs.root_note)

	if root is None:
		raise harmonic_delay.timing.InvalidParameter(f"Unknown root note: {inputs.root_note!r}")

	multiplier = inputs.multiplier

	timing = harmonic_delay.timing.compute_timing(root.frequency, inputs.semitone_offset, inputs.tempo, multiplier)

	# The note name follows the nearest whole semitone of a fractional offset.
	note = harmonic_delay.pitch.transpose_note(root.name, round(inputs.semitone_offset))

	classification = harmonic_delay.metaphysics.classify_note(note or "", chakra_table)

	return CalculatorSnapshot(
		inputs = inputs,
		root_frequency = root.frequency,
		note = note,
		multiplier = multiplier,
		timing = timing,
		classification = classification,
		numerology = harmonic_delay.metaphysics.numerology_reduce(timing.delay_time),
	)


def inputs_from_config (config: typing.Dict[str, typing.Any]) -> CalculatorInputs:

	"""Build starting inputs from the ``calculator`` section of a config dict.

	Missing keys keep their defaults; the result is clamped to the UI ranges.
	"""

	section = config.get("calculator", {}) or {}

	fields = {field.name for field in dataclasses.fields(CalculatorInputs)}
	unknown = set(section) - fields

	if unknown:
		logger.warning(f"Ignoring unknown calculator settings: {sorted(unknown)}")

	return CalculatorInputs(**{key: value for key, value in section.items() if key in fields}).clamped()

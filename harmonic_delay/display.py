"""Text rendering of calculator results.

Formats a :class:`~harmonic_delay.calculator.CalculatorSnapshot` as the lines
the calculator shows, every number to 2 decimal places with its unit::

	Root note: C3 (130.81 Hz)  Tempo: 120.00 BPM  Multiplier: 1/4 note (x0.25)
	Frequency: 130.81 Hz
	Time per cycle: 7.64 ms
	Delay time: 1.91 ms
	1 beat: 500.00 ms
	Beat ratio: 0.00
	Nearest division: 1/64  (~ 1/262 of a beat)
	Note: C  Chakra: Root (Red): Grounding, stability
	Numerology: 11 (master number)
"""

import typing

import harmonic_delay.metaphysics
import harmonic_delay.timing

if typing.TYPE_CHECKING:
	from harmonic_delay.calculator import CalculatorSnapshot


EMPTY = "-"


def format_hz (value: float) -> str:

	return f"{value:.2f} Hz"


def format_ms (value: float) -> str:

	return f"{value:.2f} ms"


def format_beat_fraction (beat_ratio: float) -> str:

	"""Return the approximate "~ 1/N of a beat" readout.

	Ratios of a whole beat or more read as multiples instead, e.g. ``"~ 2x a beat"``.
	"""

	if beat_ratio <= 0:
		return EMPTY

	if beat_ratio >= 1:
		return f"~ {beat_ratio:.0f}x a beat"

	return f"~ 1/{harmonic_delay.timing.beat_fraction_denominator(beat_ratio)} of a beat"


def format_numerology (number: int) -> str:

	if harmonic_delay.metaphysics.is_master_number(number):
		return f"{number} (master number)"

	return str(number)


def format_notes (notes: typing.Sequence[str]) -> str:

	"""Join a scale or chord for display, ``"-"`` when empty."""

	if not notes:
		return EMPTY

	return " ".join(notes)


def format_snapshot (snapshot: "CalculatorSnapshot") -> typing.List[str]:

	"""Return the display lines for one evaluated snapshot."""

	inputs = snapshot.inputs
	timing = snapshot.timing

	header = (
		f"Root note: {inputs.root_note} ({format_hz(snapshot.root_frequency)})"
		f"  Tempo: {inputs.tempo:.2f} BPM"
		f"  Multiplier: {inputs.multiplier_label} (x{snapshot.multiplier:g})"
	)

	if inputs.semitone_offset:
		header += f"  Transpose: {inputs.semitone_offset:+g} st"

	return [
		header,
		f"Frequency: {format_hz(timing.frequency)}",
		f"Time per cycle: {format_ms(timing.time_per_cycle)}",
		f"Delay time: {format_ms(timing.delay_time)}",
		f"1 beat: {format_ms(timing.beat_time)}",
		f"Beat ratio: {timing.beat_ratio:.2f}",
		f"Nearest division: {timing.nearest_division}  ({format_beat_fraction(timing.beat_ratio)})",
		f"Note: {snapshot.note or EMPTY}  Chakra: {snapshot.classification.describe()}",
		f"Numerology: {format_numerology(snapshot.numerology)}",
	]

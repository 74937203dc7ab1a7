"""Harmonic timing engine.

Relates a note's frequency to a tempo.  One waveform cycle of the note lasts
``1000 / frequency`` milliseconds; scaling that by a rhythmic multiplier gives
a delay time, and dividing the delay time by the length of one beat gives the
beat ratio, which is then matched against the named divisions in
``harmonic_delay.constants.beat_divisions.NEAREST_DIVISIONS``.

Example:
	```python
	import harmonic_delay.timing

	result = harmonic_delay.timing.compute_timing(130.81, 0, 120, 0.25)
	result.delay_time          # → 1.911...
	result.nearest_division    # → "1/64"
	```
"""

import dataclasses
import functools
import logging
import math
import typing

import harmonic_delay.constants.beat_divisions


logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000.0
MS_PER_MINUTE = 60000.0
SEMITONES_PER_OCTAVE = 12


class InvalidParameter (ValueError):

	"""
	Raised when a numeric input is outside the engine's domain.
	"""


@dataclasses.dataclass(frozen=True)
class TimingResult:

	"""
	Everything derived from one set of timing inputs.

	Attributes:
		frequency: Transposed note frequency in Hz.
		time_per_cycle: Length of one waveform cycle in milliseconds.
		delay_time: ``time_per_cycle`` scaled by the multiplier, in milliseconds.
		beat_time: Length of one beat at the tempo, in milliseconds.
		beat_ratio: ``delay_time`` as a fraction of ``beat_time``.
		nearest_division: Label of the closest named beat division.
	"""

	frequency: float
	time_per_cycle: float
	delay_time: float
	beat_time: float
	beat_ratio: float
	nearest_division: str


def _require_positive (name: str, value: float) -> float:

	"""
	Return ``value`` as a float, or raise ``InvalidParameter`` if it is not a positive finite number.
	"""

	try:
		number = float(value)
	except (TypeError, ValueError):
		raise InvalidParameter(f"{name} must be a number, got {value!r}") from None

	if not math.isfinite(number) or number <= 0:
		raise InvalidParameter(f"{name} must be a positive number, got {value!r}")

	return number


def _require_finite (name: str, value: float) -> float:

	try:
		number = float(value)
	except (TypeError, ValueError):
		raise InvalidParameter(f"{name} must be a number, got {value!r}") from None

	if not math.isfinite(number):
		raise InvalidParameter(f"{name} must be finite, got {value!r}")

	return number


def transpose_frequency (frequency: float, semitones: float) -> float:

	"""Shift a frequency by a number of equal-tempered semitones.

	Parameters:
		frequency: Starting frequency in Hz (must be positive).
		semitones: Offset in semitones. Negative moves down, fractional values
			are allowed.

	Returns:
		``frequency * 2 ** (semitones / 12)``

	Example:
		```python
		transpose_frequency(220.0, 12)   # → 440.0
		transpose_frequency(440.0, -24)  # → 110.0
		```
	"""

	frequency = _require_positive("Frequency", frequency)
	semitones = _require_finite("Semitone offset", semitones)

	try:
		shifted = frequency * math.pow(2.0, semitones / SEMITONES_PER_OCTAVE)
	except OverflowError:
		raise InvalidParameter(f"Semitone offset {semitones!r} moves the frequency out of range") from None

	if not math.isfinite(shifted) or shifted <= 0:
		raise InvalidParameter(f"Semitone offset {semitones!r} moves the frequency out of range")

	return shifted


def nearest_division (beat_ratio: float) -> str:

	"""Return the label of the named division closest to ``beat_ratio``.

	Ratios beyond either end of the table resolve to the end entry ("1/1" or
	"1/64").  When two entries are equally close the one listed first wins.
	"""

	table = harmonic_delay.constants.beat_divisions.NEAREST_DIVISIONS

	label, _ = min(table, key=lambda entry: abs(entry[1] - beat_ratio))

	return label


def beat_fraction_denominator (beat_ratio: float) -> int:

	"""
	Return N for a "~ 1/N of a beat" readout (``round(1 / beat_ratio)``).
	"""

	beat_ratio = _require_positive("Beat ratio", beat_ratio)

	return round(1.0 / beat_ratio)


@functools.lru_cache(maxsize=1024)
def compute_timing (root_frequency: float, semitone_offset: float, tempo: float, multiplier: float) -> TimingResult:

	"""Derive delay timing from a note, a tempo and a rhythmic multiplier.

	Parameters:
		root_frequency: Frequency of the root note in Hz.
		semitone_offset: Transposition applied to the root, in semitones. Not
			range-checked; the calculator clamps it for the UI.
		tempo: Tempo in beats per minute.
		multiplier: Rhythmic multiplier applied to one cycle's duration.

	Returns:
		A ``TimingResult``.

	Raises:
		InvalidParameter: If ``root_frequency``, ``tempo`` or ``multiplier``
			is zero, negative or not finite, or ``semitone_offset`` is not
			finite or shifts the frequency beyond the range of a float.

	Example:
		```python
		result = compute_timing(261.63, 0, 120, 0.25)
		result.beat_time         # → 500.0
		result.delay_time        # → 0.955...
		```
	"""

	tempo = _require_positive("Tempo", tempo)
	multiplier = _require_positive("Multiplier", multiplier)

	frequency = transpose_frequency(root_frequency, semitone_offset)
	time_per_cycle = MS_PER_SECOND / frequency
	delay_time = time_per_cycle * multiplier
	beat_time = MS_PER_MINUTE / tempo
	beat_ratio = delay_time / beat_time

	result = TimingResult(
		frequency = frequency,
		time_per_cycle = time_per_cycle,
		delay_time = delay_time,
		beat_time = beat_time,
		beat_ratio = beat_ratio,
		nearest_division = nearest_division(beat_ratio),
	)

	logger.debug(f"Timing at {tempo} BPM x{multiplier}: {result}")

	return result

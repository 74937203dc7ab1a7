"""Beat-division and multiplier tables.

All multiplier values scale the time of one waveform cycle; 1.0 leaves it
unchanged.  ``BEAT_DIVISIONS`` is listed in the order the calculator's slider
walks through it (index 0-24), longest first::

    import harmonic_delay.constants.beat_divisions as bd

    bd.BEAT_DIVISIONS[bd.DEFAULT_BEAT_DIVISION_INDEX]   # ("1/4 note", 0.25)

Each note tier ``1/2`` ... ``1/64`` appears three times:

- dotted: ``0.75 / 2**k``
- plain: ``0.5 / 2**k``
- triplet: ``1 / (2**k * 3)``

``NEAREST_DIVISIONS`` is the smaller table the timing engine matches a beat
ratio against.  Its order matters: on a tie the earlier entry wins.
"""

import typing


def _build_beat_divisions () -> typing.List[typing.Tuple[str, float]]:

	"""
	Build the ordered (label, multiplier) table.
	"""

	divisions: typing.List[typing.Tuple[str, float]] = []

	for k in range(6, 0, -1):
		divisions.append((f"{2 ** k}x", float(2 ** k)))

	divisions.append(("1/1 note", 1.0))

	for k in range(6):
		denominator = 2 ** (k + 1)
		divisions.append((f"dotted 1/{denominator} note", 0.75 / 2 ** k))
		divisions.append((f"1/{denominator} note", 0.5 / 2 ** k))
		divisions.append((f"1/{denominator} note triplet", 1 / (2 ** k * 3)))

	return divisions


BEAT_DIVISIONS: typing.List[typing.Tuple[str, float]] = _build_beat_divisions()

BEAT_DIVISION_VALUES: typing.Dict[str, float] = dict(BEAT_DIVISIONS)

DEFAULT_BEAT_DIVISION_INDEX = 11
DEFAULT_BEAT_DIVISION_LABEL = "1/4 note"
DEFAULT_MULTIPLIER = 0.25

HARMONIC_MULTIPLIERS: typing.List[typing.Tuple[str, float]] = [
	("0.25x", 0.25),
	("0.5x", 0.5),
	("1x", 1.0),
	("2x", 2.0),
	("4x", 4.0),
	("8x", 8.0),
	("16x", 16.0),
	("32x", 32.0),
	("64x", 64.0),
]

DEFAULT_HARMONIC_MULTIPLIER = "1x"

NEAREST_DIVISIONS: typing.List[typing.Tuple[str, float]] = [
	("1/1", 1.0),
	("1/2", 0.5),
	("1/4", 0.25),
	("1/8", 0.125),
	("1/16", 0.0625),
	("1/32", 0.03125),
	("1/64", 0.015625),
]

import json

import pytest

import harmonic_delay.calculator
import harmonic_delay.timing


# ---------------------------------------------------------------------------
# Defaults and reset
# ---------------------------------------------------------------------------

def test_reset_defaults (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	assert default_inputs.tempo == 120
	assert default_inputs.root_note == "C3"
	assert default_inputs.semitone_offset == 0
	assert default_inputs.beat_division_index == 11
	assert default_inputs.use_harmonic_multiplier is False
	assert default_inputs.multiplier == 0.25
	assert default_inputs.multiplier_label == "1/4 note"


def test_reset_discards_changes (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	changed = default_inputs.replace(tempo=90, semitone_offset=-5)

	assert changed != default_inputs
	assert harmonic_delay.calculator.reset() == default_inputs


def test_harmonic_toggle_selects_multiplier (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	inputs = default_inputs.replace(harmonic_multiplier="2x")

	assert inputs.multiplier == 0.25

	inputs = inputs.replace(use_harmonic_multiplier=True)

	assert inputs.multiplier == 2.0
	assert inputs.multiplier_label == "2x"


# ---------------------------------------------------------------------------
# Clamping and parsing
# ---------------------------------------------------------------------------

def test_clamped_applies_ui_ranges (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	high = default_inputs.replace(tempo=300, semitone_offset=30, beat_division_index=40).clamped()
	low = default_inputs.replace(tempo=10, semitone_offset=-30, beat_division_index=-1).clamped()

	assert (high.tempo, high.semitone_offset, high.beat_division_index) == (240, 24, 24)
	assert (low.tempo, low.semitone_offset, low.beat_division_index) == (30, -24, 0)


def test_parse_number_keeps_previous_value_on_bad_text () -> None:

	assert harmonic_delay.calculator.parse_number("96", 120) == 96
	assert harmonic_delay.calculator.parse_number(" 97.5 ", 120.0) == 97.5
	assert harmonic_delay.calculator.parse_number("", 120) == 120
	assert harmonic_delay.calculator.parse_number("fast", 120) == 120
	assert harmonic_delay.calculator.parse_number("nan", 0.5) == 0.5


def test_parse_number_matches_previous_type () -> None:

	value = harmonic_delay.calculator.parse_number("3.7", 0)

	assert value == 3
	assert isinstance(value, int)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def test_evaluate_defaults (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	snapshot = harmonic_delay.calculator.evaluate(default_inputs)

	assert snapshot.root_frequency == 130.81
	assert snapshot.multiplier == 0.25
	assert snapshot.timing.delay_time == pytest.approx(1.9112, rel=1e-4)
	assert snapshot.timing.nearest_division == "1/64"
	assert snapshot.note == "C"
	assert snapshot.classification.chakra == "Root"
	assert snapshot.numerology == 11


def test_evaluate_transposes_note_and_classification (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	snapshot = harmonic_delay.calculator.evaluate(default_inputs.replace(semitone_offset=5))

	assert snapshot.note == "F"
	assert snapshot.classification.chakra == "Heart"
	assert snapshot.timing.frequency == pytest.approx(174.61, rel=1e-4)


def test_evaluate_accepts_single_spelling_of_enharmonic_note (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	snapshot = harmonic_delay.calculator.evaluate(default_inputs.replace(root_note="Bb3"))

	assert snapshot.root_frequency == 233.08
	assert snapshot.note == "A#"


def test_evaluate_with_injected_table (default_inputs: harmonic_delay.calculator.CalculatorInputs, elemental_table: dict) -> None:

	snapshot = harmonic_delay.calculator.evaluate(default_inputs, elemental_table)

	assert snapshot.classification.chakra == "Earth"


def test_evaluate_unknown_root_raises (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	with pytest.raises(harmonic_delay.timing.InvalidParameter, match="Unknown root note"):
		harmonic_delay.calculator.evaluate(default_inputs.replace(root_note="H9"))


def test_evaluate_zero_tempo_raises_unless_clamped (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	inputs = default_inputs.replace(tempo=0)

	with pytest.raises(harmonic_delay.timing.InvalidParameter):
		harmonic_delay.calculator.evaluate(inputs)

	assert harmonic_delay.calculator.evaluate(inputs.clamped()).timing.beat_time == pytest.approx(2000.0)


def test_snapshot_as_dict_is_json_serialisable (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	data = json.loads(json.dumps(harmonic_delay.calculator.evaluate(default_inputs).as_dict()))

	assert data["inputs"]["root_note"] == "C3"
	assert data["timing"]["beat_time"] == 500.0
	assert data["multiplier_label"] == "1/4 note"
	assert data["master_number"] is True


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def test_inputs_from_empty_config () -> None:

	assert harmonic_delay.calculator.inputs_from_config({}) == harmonic_delay.calculator.reset()
	assert harmonic_delay.calculator.inputs_from_config({"calculator": None}) == harmonic_delay.calculator.reset()


def test_inputs_from_config_clamps_and_ignores_unknown_keys () -> None:

	inputs = harmonic_delay.calculator.inputs_from_config({
		"calculator": {"tempo": 500, "root_note": "A3", "volume": 11},
	})

	assert inputs.tempo == 240
	assert inputs.root_note == "A3"


def test_fractional_offset_names_the_nearest_note (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	"""A fractional offset reports the note nearest the transposed frequency."""

	below = harmonic_delay.calculator.evaluate(default_inputs.replace(semitone_offset=-0.6))
	above = harmonic_delay.calculator.evaluate(default_inputs.replace(semitone_offset=0.4))

	assert below.timing.frequency < 130.81
	assert below.note == "B"
	assert above.note == "C"


def test_clamped_rejects_infinite_values (default_inputs: harmonic_delay.calculator.CalculatorInputs) -> None:

	with pytest.raises(harmonic_delay.timing.InvalidParameter):
		default_inputs.replace(semitone_offset=float("inf")).clamped()

	with pytest.raises(harmonic_delay.timing.InvalidParameter):
		default_inputs.replace(beat_division_index=float("-inf")).clamped()

import typing

import pytest

import harmonic_delay.calculator
import harmonic_delay.metaphysics


@pytest.fixture
def default_inputs () -> harmonic_delay.calculator.CalculatorInputs:

	"""The calculator's reset state."""

	return harmonic_delay.calculator.reset()


@pytest.fixture
def elemental_table () -> typing.Dict[str, harmonic_delay.metaphysics.NoteClassification]:

	"""A replacement classification table covering only C and G."""

	return {
		"C": harmonic_delay.metaphysics.NoteClassification("Earth", "Brown", "Solid"),
		"G": harmonic_delay.metaphysics.NoteClassification("Air", "White", "Light"),
	}

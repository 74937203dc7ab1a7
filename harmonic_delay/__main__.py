import argparse
import asyncio
import logging
import os
import sys
import typing

import yaml

import harmonic_delay.calculator
import harmonic_delay.constants.beat_divisions
import harmonic_delay.display
import harmonic_delay.metaphysics
import harmonic_delay.pitch
import harmonic_delay.timing
import harmonic_delay.web_ui


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(description="Harmonic delay calculator")
	parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")
	parser.add_argument("--tempo", type=float, help="Tempo in BPM (30-240)")
	parser.add_argument("--note", help="Root note, e.g. C3, F#4 or Bb3")
	parser.add_argument("--semitones", type=int, help="Semitone offset (-24 to 24)")

	multiplier = parser.add_mutually_exclusive_group()
	multiplier.add_argument("--division", help="Beat division label, e.g. 'dotted 1/8 note'")
	multiplier.add_argument("--harmonic", help="Harmonic multiplier label, e.g. 0.5x or 4x")

	parser.add_argument("--scale", nargs=2, metavar=("ROOT", "MODE"), help="Also print a scale")
	parser.add_argument("--chord", nargs=2, metavar=("ROOT", "TYPE"), help="Also print a chord")
	parser.add_argument("--web", action="store_true", help="Serve the browser calculator instead of printing")

	return parser


def inputs_from_args (
	args: argparse.Namespace,
	inputs: harmonic_delay.calculator.CalculatorInputs
) -> harmonic_delay.calculator.CalculatorInputs:

	"""
	Apply command line overrides on top of the configured inputs.
	"""

	changes: typing.Dict[str, typing.Any] = {}

	if args.tempo is not None:
		changes["tempo"] = args.tempo

	if args.note is not None:
		changes["root_note"] = args.note

	if args.semitones is not None:
		changes["semitone_offset"] = args.semitones

	if args.division is not None:
		labels = [label for label, _ in harmonic_delay.constants.beat_divisions.BEAT_DIVISIONS]

		if args.division in labels:
			changes["beat_division_index"] = labels.index(args.division)
		else:
			logger.warning(f"Unknown beat division {args.division!r}, using {harmonic_delay.constants.beat_divisions.DEFAULT_BEAT_DIVISION_LABEL!r}")
			changes["beat_division_index"] = harmonic_delay.constants.beat_divisions.DEFAULT_BEAT_DIVISION_INDEX

		changes["use_harmonic_multiplier"] = False

	if args.harmonic is not None:
		changes["harmonic_multiplier"] = args.harmonic
		changes["use_harmonic_multiplier"] = True

	return inputs.replace(**changes).clamped()


def run_web (config: dict, chakra_table: typing.Optional[typing.Dict[str, harmonic_delay.metaphysics.NoteClassification]]) -> None:

	web_config = config.get('web', {}) or {}

	web = harmonic_delay.web_ui.WebUI(
		http_port = web_config.get('http_port', 8080),
		ws_port = web_config.get('ws_port', 8765),
		chakra_table = chakra_table,
	)

	try:
		asyncio.run(web.serve_forever())
	except KeyboardInterrupt:
		logger.info("Stopping...")


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the harmonic delay calculator.
	"""

	args = build_parser().parse_args(argv)

	config = load_config(args.config)

	chakra_table = None
	if config.get('chakra_map'):
		try:
			chakra_table = harmonic_delay.metaphysics.chakra_map_from_config(config['chakra_map'])
		except ValueError as e:
			logger.error(f"Bad config: {e}")
			return 2

	if args.web:
		run_web(config, chakra_table)
		return 0

	try:
		inputs = inputs_from_args(args, harmonic_delay.calculator.inputs_from_config(config))
		snapshot = harmonic_delay.calculator.evaluate(inputs, chakra_table)
	except harmonic_delay.timing.InvalidParameter as e:
		logger.error(f"Invalid input: {e}")
		return 2

	for line in harmonic_delay.display.format_snapshot(snapshot):
		print(line)

	if args.scale:
		root, mode = args.scale
		print(f"Scale {root} {mode}: {harmonic_delay.display.format_notes(harmonic_delay.pitch.generate_scale(root, mode))}")

	if args.chord:
		root, kind = args.chord
		print(f"Chord {root} {kind}: {harmonic_delay.display.format_notes(harmonic_delay.pitch.generate_chord(root, kind))}")

	return 0


if __name__ == "__main__":
	sys.exit(main())

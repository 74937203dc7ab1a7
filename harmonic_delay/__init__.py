"""
Harmonic Delay - relate a note's frequency to a tempo.

Pick a root note, a tempo and a rhythmic subdivision, and the calculator
tells you how long one waveform cycle of the note lasts, the delay time that
subdivision gives, and how that compares to one beat.  Useful for tuning
delay and modulation effects so they sit with both the pitch and the groove
of a track.  No sound is produced.

What it does:

- **Timing.** ``compute_timing()`` transposes the root by a semitone offset
  and derives time per cycle, delay time, beat time, beat ratio and the
  nearest named beat division.
- **Beat divisions.** 25 labels from ``64x`` down to ``1/64 note triplet``,
  plus harmonic multipliers ``0.25x`` to ``64x``.
- **Pitch classes.** Transposition, seven-note modes, triads and sevenths,
  and note frequency lookup.
- **Annotations.** A chakra classification for the note and a numerological
  reduction of the delay time.
- **Front ends.** ``python -m harmonic_delay`` prints a result; add ``--web``
  for a browser calculator.

Minimal example:

    ```python
    import harmonic_delay

    result = harmonic_delay.compute_timing(261.63, 0, 120, 0.25)
    print(f"{result.delay_time:.2f} ms, nearest {result.nearest_division}")

    harmonic_delay.generate_chord("C", "min7")   # ['C', 'D#', 'G', 'A#']
    ```

Package-level exports: ``compute_timing``, ``InvalidParameter``,
``multiplier_from_label``, ``generate_scale``, ``generate_chord``,
``transpose_note``, ``note_to_frequency``, ``classify_note``,
``CalculatorInputs``, ``evaluate``.
"""

import harmonic_delay.calculator
import harmonic_delay.divisions
import harmonic_delay.metaphysics
import harmonic_delay.pitch
import harmonic_delay.timing


compute_timing = harmonic_delay.timing.compute_timing
InvalidParameter = harmonic_delay.timing.InvalidParameter
multiplier_from_label = harmonic_delay.divisions.multiplier_from_label
generate_scale = harmonic_delay.pitch.generate_scale
generate_chord = harmonic_delay.pitch.generate_chord
transpose_note = harmonic_delay.pitch.transpose_note
note_to_frequency = harmonic_delay.pitch.note_to_frequency
classify_note = harmonic_delay.metaphysics.classify_note
CalculatorInputs = harmonic_delay.calculator.CalculatorInputs
evaluate = harmonic_delay.calculator.evaluate

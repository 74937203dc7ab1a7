"""Constants for the harmonic delay calculator.

This package contains two sets of static tables:

- ``harmonic_delay.constants.notes`` - Pitch classes, the selectable root note
  table (C3-B4) and the reference-octave frequency table
- ``harmonic_delay.constants.beat_divisions`` - Beat-division labels, harmonic
  multipliers and the nearest-division table used by the timing engine
"""

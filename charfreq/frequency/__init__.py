"""
Package charfreq.frequency - Character frequency counting pipeline.

Modules:
- errors: FrequencyError, InvalidThreadCount, UnsupportedCaseFold
- case_fold: CaseSense policy va folding functions
- partition: Chia text thanh Segment theo character index
- counter: Worker counting logic (segment + sequential)
- merge: Gop partial maps (sequential + tree)
"""

"""Shared application constants.

Classification hints and bounds used by goal-progress computation, kept in
one place so the heuristics are documented and adjustable.
"""

# A goal whose unit contains this marker (case-insensitive) tracks body weight
WEIGHT_UNIT_MARKER = "kg"

# Title keywords (case-insensitive) that mark a weight goal.
# French and English, matching what coaches type in the goal form.
WEIGHT_TITLE_TERMS = ("poids", "weight")

# Explicit goal_type tag for weight goals
WEIGHT_GOAL_TYPE = "weight"

# Progress percentage bounds
PERCENT_MIN = 0
PERCENT_MAX = 100

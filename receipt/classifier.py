# receipt/classifier.py
"""
Quality‑score classification.

Bounds are inclusive on the upper end and checked in ascending order, so
scores outside [0, 5] land in the lowest or highest band instead of
being rejected.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

POOR = "Poor (0-1.5)"
AVERAGE = "Average (1.6-3.0)"
GOOD = "Good (3.1-4.0)"
EXCELLENT = "Excellent (4.1-5.0)"

# (inclusive upper bound, label) – order matters
QUALITY_BANDS = (
    (1.5, POOR),
    (3.0, AVERAGE),
    (4.0, GOOD),
)

QUALITY_LABELS = (POOR, AVERAGE, GOOD, EXCELLENT)


def classify(quality_score: float) -> str:
    """Return the quality band label for a single score."""
    for upper, label in QUALITY_BANDS:
        if quality_score <= upper:
            return label
    return EXCELLENT


def classify_scores(scores: pd.Series) -> pd.Series:
    """Vectorised :func:`classify`; NaN falls through to the top band."""
    conditions = [scores <= upper for upper, _ in QUALITY_BANDS]
    labels = [label for _, label in QUALITY_BANDS]
    return pd.Series(
        np.select(conditions, labels, default=EXCELLENT),
        index=scores.index,
        dtype=object,
    )

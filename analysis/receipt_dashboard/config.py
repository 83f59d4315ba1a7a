"""Configuration for the goods receipt dashboard.

This module provides default settings and a helper for loading overrides
from a YAML file.
"""

from pathlib import Path
from typing import Dict

import yaml

# ────────────────────────────────────────────────────────────────────────────
# Configuration defaults
# ────────────────────────────────────────────────────────────────────────────
DEFAULT_CFG: Dict = {
    "top_n": 10,                         # Rows in the top purchase order table
    "chart_top_n": 5,                    # Bars in the top purchase order chart
    "quality_issue_threshold": 2.0,      # Scores below this are quality issues
    "dataset_file": Path("data/SAP_MM_Inventory_Management_Sample_Dataset.csv"),
    "output_dir": Path("output"),
}

def load_config(path: Path) -> Dict:
    """Merge settings from a YAML file over the defaults; fall back to defaults."""
    try:
        content = yaml.safe_load(Path(path).read_text()) or {}
    except FileNotFoundError:
        return dict(DEFAULT_CFG)

    cfg = {**DEFAULT_CFG, **content}
    for key in ("dataset_file", "output_dir"):
        cfg[key] = Path(cfg[key])
    return cfg

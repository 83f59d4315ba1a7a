"""Export functions for the goods receipt dashboard.

This module provides functions to export dashboard tables to Excel files.
"""

import os
from pathlib import Path
from typing import Dict

import pandas as pd

SHEET_NAMES = {
    "quality_distribution": "Quality Distribution",
    "top_purchase_orders": "Top Purchase Orders",
    "receipt_trend": "Receipt Trend",
    "quality_issues": "Quality Issues",
}

def export_to_excel(tables: Dict[str, pd.DataFrame],
                    output_dir: str = "output",
                    file_name: str = "goods_receipt_dashboard.xlsx") -> Path:
    """Export dashboard tables to an Excel workbook.

    Args:
        tables: Dictionary of DataFrames to export to sheets
        output_dir: Directory to save the Excel file
        file_name: Name of the workbook

    Returns:
        Path to the created Excel file
    """
    os.makedirs(output_dir, exist_ok=True)
    outfile = Path(output_dir) / file_name

    with pd.ExcelWriter(outfile, engine="xlsxwriter") as xl:
        for key, sheet in SHEET_NAMES.items():
            if key in tables:
                tables[key].to_excel(xl, sheet_name=sheet, index=False)

    return outfile

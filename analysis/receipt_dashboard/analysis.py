"""Main analysis function for the goods receipt dashboard.

This module renders the dashboard summaries and the quality-issue list as
DataFrames, one per export sheet.
"""

from typing import Dict

import pandas as pd

from receipt.models import to_frame
from receipt.queries import ReceiptQueries
from receipt.repository import GoodsReceiptRepository
from analysis.receipt_dashboard.config import DEFAULT_CFG
from analysis.receipt_dashboard.summary import build_receipt_summary

QUALITY_COLUMNS = ["quality_band", "receipt_count", "share"]
PO_COLUMNS = ["po_id", "total_quantity", "avg_quality", "receipt_count"]
TREND_COLUMNS = ["date", "total_quantity", "receipt_count"]
ISSUE_COLUMNS = ["gr_id", "po_id", "received_date", "received_quantity", "quality_score"]

def analyse_goods_receipts(receipt_df: pd.DataFrame,
                           cfg: Dict | None = None) -> Dict[str, pd.DataFrame]:
    """Build the dashboard tables for a goods-receipt dataset.

    Args:
        receipt_df: DataFrame with goods receipt data
        cfg: Optional configuration dictionary to override defaults

    Returns:
        Dictionary of DataFrames with analysis results
    """
    cfg = {**DEFAULT_CFG, **(cfg or {})}
    repo = GoodsReceiptRepository(receipt_df)
    summary = build_receipt_summary(repo, cfg)
    queries = ReceiptQueries(repo)

    quality_distribution = pd.DataFrame(
        [(b.name, b.count, b.count / summary.record_count)
         for b in summary.quality_buckets],
        columns=QUALITY_COLUMNS,
    )
    issues = queries.quality_issues(cfg["quality_issue_threshold"])

    return {
        "quality_distribution": quality_distribution,
        "top_purchase_orders": to_frame(summary.top_purchase_orders, PO_COLUMNS),
        "receipt_trend": to_frame(summary.trend_points, TREND_COLUMNS),
        "quality_issues": to_frame(issues, ISSUE_COLUMNS),
    }

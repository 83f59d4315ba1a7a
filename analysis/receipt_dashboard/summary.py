"""Dashboard summary functions.

This module builds the default dashboard view for one goods-receipt dataset.
"""

import logging
from typing import Dict

from receipt.analytics import ReceiptAnalytics
from receipt.models import ReceiptSummary
from receipt.repository import GoodsReceiptRepository
from analysis.receipt_dashboard.config import DEFAULT_CFG

logger = logging.getLogger(__name__)

def build_receipt_summary(repo: GoodsReceiptRepository,
                          cfg: Dict | None = None) -> ReceiptSummary:
    """Compute the quality, purchase order and trend summaries.

    The purchase order roll-up is computed once; the table view and the
    chart view are both prefixes of it.

    Args:
        repo: GoodsReceiptRepository with the loaded dataset
        cfg: Optional configuration dictionary to override defaults

    Returns:
        ReceiptSummary for the dataset
    """
    cfg = {**DEFAULT_CFG, **(cfg or {})}
    analytics = ReceiptAnalytics(repo)

    summary = ReceiptSummary(
        quality_buckets=analytics.group_by_quality(),
        top_purchase_orders=analytics.top_purchase_orders(cfg["top_n"]),
        trend_points=analytics.trend_by_date(),
        record_count=len(repo),
        chart_top_n=cfg["chart_top_n"],
    )
    logger.info("Summarised %d goods receipt records", summary.record_count)
    return summary

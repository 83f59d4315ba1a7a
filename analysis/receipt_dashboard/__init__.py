"""Goods Receipt Dashboard Package.

This package turns a goods-receipt dataset into the summaries behind the
inventory dashboard: quality-score distribution, top purchase orders by
received quantity, the receipt trend, and the list of quality issues.
"""

from analysis.receipt_dashboard.summary import build_receipt_summary
from analysis.receipt_dashboard.analysis import analyse_goods_receipts

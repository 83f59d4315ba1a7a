import os
import sys
import pandas as pd
import pytest

# Add the project root (parent directory of tests/) to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from receipt.analytics import ReceiptAnalytics
from receipt.repository import GoodsReceiptRepository
from analysis.receipt_dashboard import analyse_goods_receipts, build_receipt_summary
from analysis.receipt_dashboard.config import DEFAULT_CFG, load_config
from analysis.receipt_dashboard.export import export_to_excel
from analysis.receipt_dashboard.main import main

def _many_pos(n):
    return pd.DataFrame({
        'gr_id': [f'G{i}' for i in range(n)],
        'po_id': [f'PO{i}' for i in range(n)],
        'received_date': ['2024-01-01'] * n,
        'received_quantity': list(range(n)),
        'quality_score': [3.0] * n,
    })

def test_summary_matches_independent_aggregations(repo):
    """The façade returns exactly what each aggregation returns on its own."""
    summary = build_receipt_summary(repo)
    analytics = ReceiptAnalytics(repo)

    assert summary.quality_buckets == analytics.group_by_quality()
    assert summary.top_purchase_orders == analytics.top_purchase_orders(10)
    assert summary.trend_points == analytics.trend_by_date()
    assert summary.record_count == 3

def test_summary_top_views_share_one_rollup():
    repo = GoodsReceiptRepository(_many_pos(12))
    summary = build_receipt_summary(repo)

    assert len(summary.top_purchase_orders) == 10
    assert len(summary.chart_purchase_orders) == 5
    assert summary.chart_purchase_orders == summary.top_purchase_orders[:5]
    assert summary.top_purchase_orders[0].po_id == 'PO11'

def test_summary_config_overrides():
    repo = GoodsReceiptRepository(_many_pos(12))
    summary = build_receipt_summary(repo, {"top_n": 3, "chart_top_n": 2})

    assert [s.po_id for s in summary.top_purchase_orders] == ['PO11', 'PO10', 'PO9']
    assert [s.po_id for s in summary.chart_purchase_orders] == ['PO11', 'PO10']

def test_summary_of_empty_dataset(empty_repo):
    summary = build_receipt_summary(empty_repo)
    assert summary.quality_buckets == ()
    assert summary.top_purchase_orders == ()
    assert summary.trend_points == ()
    assert summary.record_count == 0

def test_analyse_goods_receipts_tables(receipt_df):
    tables = analyse_goods_receipts(receipt_df)

    assert set(tables) == {
        "quality_distribution", "top_purchase_orders", "receipt_trend", "quality_issues"
    }
    assert tables["quality_distribution"]["quality_band"].tolist() == [
        "Excellent (4.1-5.0)", "Poor (0-1.5)", "Average (1.6-3.0)"
    ]
    assert tables["quality_distribution"]["share"].tolist() == pytest.approx([1 / 3] * 3)
    assert tables["top_purchase_orders"]["po_id"].tolist() == ['PO2', 'PO1']
    assert tables["top_purchase_orders"]["avg_quality"].tolist() == [3.0, 2.75]
    assert tables["receipt_trend"]["date"].tolist() == ['2024-01-01', '2024-01-02']
    assert tables["quality_issues"]["gr_id"].tolist() == ['G2']

def test_analyse_goods_receipts_threshold(receipt_df):
    tables = analyse_goods_receipts(receipt_df, {"quality_issue_threshold": 3.5})
    assert tables["quality_issues"]["gr_id"].tolist() == ['G2', 'G3']

def test_analyse_empty_dataset_keeps_columns():
    empty = pd.DataFrame(columns=[
        'gr_id', 'po_id', 'received_date', 'received_quantity', 'quality_score'
    ])
    tables = analyse_goods_receipts(empty)

    assert all(t.empty for t in tables.values())
    assert tables["top_purchase_orders"].columns.tolist() == [
        "po_id", "total_quantity", "avg_quality", "receipt_count"
    ]

def test_load_config_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "missing.yml") == DEFAULT_CFG

def test_load_config_merges_yaml(tmp_path):
    path = tmp_path / "dashboard.yml"
    path.write_text("top_n: 3\noutput_dir: reports\n")

    cfg = load_config(path)
    assert cfg["top_n"] == 3
    assert cfg["chart_top_n"] == DEFAULT_CFG["chart_top_n"]
    assert str(cfg["output_dir"]) == "reports"

def test_export_to_excel(tmp_path, receipt_df):
    tables = analyse_goods_receipts(receipt_df)
    outfile = export_to_excel(tables, str(tmp_path / "out"))

    assert outfile.exists()
    assert outfile.suffix == ".xlsx"

def test_main_builds_workbook_and_prints_po(tmp_path, capsys):
    """The CLI loads a CSV, exports the workbook and prints one PO."""
    csv = tmp_path / "receipts.csv"
    csv.write_text(
        "GR_ID,PO_ID,Received_Date,Received_Quantity,Quality_Score\n"
        "G1,PO1,2024-01-02,10,4.5\n"
        "G2,PO1,2024-01-02,5,1.0\n"
        "G3,PO2,2024-01-01,20,3.0\n"
    )
    out_dir = tmp_path / "out"

    main([
        "--csv", str(csv),
        "--config", str(tmp_path / "missing.yml"),
        "--output-dir", str(out_dir),
        "--po", "PO1",
    ])

    printed = capsys.readouterr().out
    assert (out_dir / "goods_receipt_dashboard.xlsx").exists()
    assert "Purchase Order: PO1" in printed
    assert "G2" in printed and "G3" not in printed

def test_quality_distribution_share_sums_to_one():
    """Each band carries its share of all receipts."""
    df = _many_pos(4).assign(quality_score=[1.0, 1.2, 3.5, 4.8])
    dist = analyse_goods_receipts(df)["quality_distribution"]

    assert dist.set_index("quality_band")["share"].to_dict() == {
        "Poor (0-1.5)": 0.5, "Good (3.1-4.0)": 0.25, "Excellent (4.1-5.0)": 0.25
    }
    assert dist["share"].sum() == pytest.approx(1.0)

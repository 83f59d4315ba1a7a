import os
import sys

import pandas as pd
import pytest

# Add the project root (parent directory of tests/) to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from receipt.repository import GoodsReceiptRepository


@pytest.fixture
def receipt_df():
    """The three-receipt example dataset used across the suite."""
    return pd.DataFrame({
        'gr_id': ['G1', 'G2', 'G3'],
        'po_id': ['PO1', 'PO1', 'PO2'],
        'received_date': ['2024-01-02', '2024-01-02', '2024-01-01'],
        'received_quantity': [10, 5, 20],
        'quality_score': [4.5, 1.0, 3.0],
    })


@pytest.fixture
def repo(receipt_df):
    return GoodsReceiptRepository(receipt_df)


@pytest.fixture
def empty_repo():
    return GoodsReceiptRepository(pd.DataFrame(columns=[
        'gr_id', 'po_id', 'received_date', 'received_quantity', 'quality_score'
    ]))

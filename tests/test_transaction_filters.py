from __future__ import annotations

from datetime import timedelta

import pytest

from conftest import DAY_ONE, make_tx
from trade_journal.models import TransactionKind
from trade_journal.services.portfolio import filter_transactions


def build_transactions():
    return [
        make_tx("t3", "SELL", 5, 8600, day=4, symbol="BBCA"),
        make_tx("t1", "BUY", 10, 8500, day=0, symbol="BBCA"),
        make_tx("t2", "BUY", 20, 3500, day=2, symbol="TLKM"),
        make_tx("t4", "BUY", 5, 8700, day=6, symbol="BBCA"),
    ]


def test_symbol_filter_is_case_insensitive_and_sorted():
    selected = filter_transactions(build_transactions(), symbol="bbca")
    assert [tx.id for tx in selected] == ["t1", "t3", "t4"]


def test_kind_filter():
    selected = filter_transactions(build_transactions(), kind=TransactionKind.SELL)
    assert [tx.id for tx in selected] == ["t3"]


def test_date_window_is_inclusive():
    selected = filter_transactions(
        build_transactions(),
        start=DAY_ONE + timedelta(days=2),
        end=DAY_ONE + timedelta(days=4),
    )
    assert [tx.id for tx in selected] == ["t2", "t3"]


def test_no_filters_returns_everything_in_order():
    assert [tx.id for tx in filter_transactions(build_transactions())] == ["t1", "t2", "t3", "t4"]


def test_inverted_window_rejected():
    with pytest.raises(ValueError):
        filter_transactions(build_transactions(), start=DAY_ONE + timedelta(days=5), end=DAY_ONE)

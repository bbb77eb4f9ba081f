"""HTTP tests for the analytics service."""

from __future__ import annotations

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from trade_journal.api.dependencies.settings import settings_dependency
from trade_journal.config import AppSettings
from trade_journal.main import create_app


def _app(**overrides) -> FastAPI:
    settings = AppSettings(**overrides)
    app = create_app(settings)
    app.dependency_overrides[settings_dependency] = lambda: settings
    return app


def _tx(tx_id, tx_type, quantity, price, date, **extra):
    return {
        "id": tx_id,
        "symbol": extra.pop("symbol", "BBCA"),
        "type": tx_type,
        "quantity": quantity,
        "price": price,
        "date": date,
        **extra,
    }


SCENARIO = [
    _tx("t1", "BUY", 100, 8500, "2024-03-01T09:00:00+07:00", strategy_id="breakout"),
    _tx("t2", "BUY", 50, 8700, "2024-03-02T09:00:00+07:00"),
    _tx("t3", "BUY", 200, 8600, "2024-03-03T09:00:00+07:00"),
    _tx("t4", "SELL", 150, 8900, "2024-03-04T09:00:00+07:00"),
]


async def _post(app: FastAPI, path: str, payload: dict):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post(path, json=payload)


async def test_health():
    transport = ASGITransport(app=_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_analytics_returns_positions_and_stats():
    response = await _post(
        _app(),
        "/portfolio/analytics",
        {"transactions": SCENARIO, "initial_capital": 100_000_000, "current_prices": {"BBCA": 9000}},
    )
    assert response.status_code == 200
    payload = response.json()
    (position,) = payload["positions"]
    assert position["quantity"] == 200
    assert position["average_buy_price"] == 8600
    assert position["unrealized_pnl"] == 80000
    assert [t["quantity"] for t in payload["closed_trades"]] == [100, 50]
    stats = payload["stats"]
    assert stats["realized_pnl"] == 50000
    assert stats["winning_trades"] == 2
    assert stats["profit_factor"] is None
    assert stats["total_return_percent"] == 0.05
    assert [s["strategy_id"] for s in payload["strategy_stats"]] == ["breakout"]


async def test_analytics_empty_portfolio():
    response = await _post(_app(), "/portfolio/analytics", {"transactions": []})
    assert response.status_code == 200
    payload = response.json()
    assert payload["positions"] == []
    assert payload["closed_trades"] == []
    assert payload["stats"]["total_trades"] == 0
    assert payload["stats"]["win_rate"] == 0
    assert payload["stats"]["profit_factor"] == 0


async def test_fee_policy_comes_from_settings():
    transactions = [
        _tx("b1", "BUY", 100, 10, "2024-03-01T09:00:00", fees=10),
        _tx("s1", "SELL", 40, 12, "2024-03-02T09:00:00", fees=4),
    ]
    response = await _post(
        _app(include_fees_in_cost_basis=True),
        "/portfolio/analytics",
        {"transactions": transactions},
    )
    assert response.json()["positions"][0]["total_cost"] == 606


async def test_oversold_maps_to_conflict():
    transactions = [
        _tx("b1", "BUY", 100, 8000, "2024-03-01T09:00:00"),
        _tx("s1", "SELL", 150, 8100, "2024-03-02T09:00:00"),
    ]
    response = await _post(_app(), "/portfolio/analytics", {"transactions": transactions})
    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["transaction_id"] == "s1"
    assert detail["requested"] == 150
    assert detail["available"] == 100


async def test_invalid_transaction_maps_to_unprocessable():
    transactions = [_tx("neg", "BUY", -10, 8000, "2024-03-01T09:00:00")]
    response = await _post(_app(), "/portfolio/analytics", {"transactions": transactions})
    assert response.status_code == 422
    assert response.json()["detail"]["transaction_id"] == "neg"


async def test_transaction_filter_endpoint():
    response = await _post(
        _app(),
        "/portfolio/transactions/filter",
        {"transactions": SCENARIO, "type": "BUY", "end": "2024-03-02T09:00:00+07:00"},
    )
    assert response.status_code == 200
    assert [tx["id"] for tx in response.json()] == ["t1", "t2"]


async def test_transaction_filter_rejects_inverted_window():
    response = await _post(
        _app(),
        "/portfolio/transactions/filter",
        {
            "transactions": SCENARIO,
            "start": "2024-03-04T00:00:00+07:00",
            "end": "2024-03-01T00:00:00+07:00",
        },
    )
    assert response.status_code == 400


async def test_plan_review_endpoint():
    response = await _post(
        _app(),
        "/plans/review",
        {
            "watchlist": ["executed", "skipped", "planned", "executed"],
            "checklist": [{"text": "Check foreign flow", "completed": True}, {"text": "Set stop loss"}],
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["checklist_progress"] == {"completed": 1, "total": 2}
    assert round(payload["adherence_rate"], 2) == 66.67


async def test_mixed_naive_and_aware_dates_are_normalised():
    transactions = [
        _tx("b1", "BUY", 100, 8000, "2024-03-01T09:00:00+07:00"),
        _tx("s1", "SELL", 40, 8200, "2024-03-02T09:00:00"),
    ]
    response = await _post(_app(), "/portfolio/analytics", {"transactions": transactions})
    assert response.status_code == 200
    (trade,) = response.json()["closed_trades"]
    assert trade["buy_date"].startswith("2024-03-01T02:00:00")
    assert trade["sell_date"].startswith("2024-03-02T02:00:00")
    assert trade["realized_pnl"] == 8000


async def test_filter_window_mixes_naive_and_aware_dates():
    response = await _post(
        _app(),
        "/portfolio/transactions/filter",
        {"transactions": SCENARIO, "start": "2024-03-02T00:00:00", "end": "2024-03-03T09:00:00+07:00"},
    )
    assert response.status_code == 200
    assert [tx["id"] for tx in response.json()] == ["t2", "t3"]

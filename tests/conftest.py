import asyncio
import inspect
import pathlib
import sys
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trade_journal.models import Transaction, TransactionKind  # noqa: E402

DAY_ONE = datetime(2024, 3, 1, 9, 0)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the suite."""

    config.addinivalue_line("markers", "asyncio: mark test as running in an asyncio event loop")


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute async test functions without requiring pytest-asyncio."""

    test_function = pyfuncitem.obj
    if inspect.iscoroutinefunction(test_function):
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            loop.run_until_complete(test_function(**pyfuncitem.funcargs))
        finally:
            asyncio.set_event_loop(None)
            loop.close()
        return True
    return None


def make_tx(
    tx_id: str,
    kind: str,
    quantity: str | int,
    price: str | int,
    day: int = 0,
    *,
    symbol: str = "BBCA",
    fees: str | int = 0,
    strategy_id: str | None = None,
) -> Transaction:
    """Build a transaction ``day`` days after the first trading day."""

    return Transaction(
        id=tx_id,
        symbol=symbol,
        kind=TransactionKind(kind),
        quantity=Decimal(str(quantity)),
        price=Decimal(str(price)),
        timestamp=DAY_ONE + timedelta(days=day),
        fees=Decimal(str(fees)),
        strategy_id=strategy_id,
    )

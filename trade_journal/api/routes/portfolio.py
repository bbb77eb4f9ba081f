"""Portfolio analytics endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from trade_journal.api.dependencies.settings import settings_dependency
from trade_journal.config import AppSettings
from trade_journal.errors import InvalidTransactionError, OversoldError
from trade_journal.models import TransactionKind
from trade_journal.schemas import (
    AnalyticsRequest,
    AnalyticsResponse,
    TransactionFilterRequest,
    TransactionSchema,
)
from trade_journal.services.portfolio import analyze_portfolio, filter_transactions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analytics", response_model=AnalyticsResponse)
async def post_analytics(
    payload: AnalyticsRequest,
    settings: AppSettings = Depends(settings_dependency),
) -> AnalyticsResponse:
    """Match the submitted transactions FIFO and return positions and stats."""

    transactions = [item.to_domain() for item in payload.transactions]
    try:
        analysis = analyze_portfolio(
            transactions,
            payload.initial_capital,
            payload.current_prices,
            include_fees_in_cost_basis=settings.include_fees_in_cost_basis,
        )
    except InvalidTransactionError as exc:
        logger.warning("Rejected invalid transaction %s: %s", exc.transaction_id, exc.reason)
        raise HTTPException(
            status_code=422,
            detail={"transaction_id": exc.transaction_id, "message": exc.reason},
        ) from exc
    except OversoldError as exc:
        logger.warning("Oversold %s on %s", exc.symbol, exc.transaction_id)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "symbol": exc.symbol,
                "transaction_id": exc.transaction_id,
                "requested": float(exc.requested),
                "available": float(exc.available),
            },
        ) from exc
    return AnalyticsResponse.from_domain(analysis)


@router.post("/transactions/filter", response_model=list[TransactionSchema])
async def post_transaction_filter(payload: TransactionFilterRequest) -> list[TransactionSchema]:
    try:
        selected = filter_transactions(
            [item.to_domain() for item in payload.transactions],
            symbol=payload.symbol,
            kind=TransactionKind(payload.type) if payload.type else None,
            start=payload.start,
            end=payload.end,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [TransactionSchema.from_domain(tx) for tx in selected]


__all__ = ["router"]

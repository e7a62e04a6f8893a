"""
Tests for prediction history persistence and price refresh.

Each test runs against its own in-memory SQLite database.
"""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from conftest import FakeDataService
from stockpredict.db.database import (
    add_prediction,
    create_session_factory,
    create_sqlite_engine,
    delete_prediction,
    get_prediction,
    get_prediction_history,
    init_db,
    profit_loss_percent,
    update_current_price,
)
from stockpredict.schemas.history import HistoryEntry
from stockpredict.schemas.market import Quote
from stockpredict.schemas.prediction import Direction, PredictionResult
from stockpredict.services.history import refresh_history_prices


@pytest_asyncio.fixture
async def session():
    engine = create_sqlite_engine("sqlite+aiosqlite://")
    await init_db(engine)

    async with create_session_factory(engine)() as db:
        yield db

    await engine.dispose()


def make_result(ticker="AAPL", direction=Direction.UP, price=100.0, minutes_ago=0):
    return PredictionResult(
        ticker=ticker,
        direction=direction,
        confidence=70,
        current_price=price,
        change=1.5,
        change_percent=1.5,
        predicted_at=datetime(2024, 3, 1, 16, 0) - timedelta(minutes=minutes_ago),
    )


def quote(ticker, price) -> Quote:
    return Quote(ticker=ticker, current_price=price, change=0.0, change_percent=0.0)


class TestHistoryCrud:
    """Add, list, update and delete."""

    @pytest.mark.asyncio
    async def test_add_records_search_price(self, session):
        record = await add_prediction(session, make_result(price=150.0), "alice")

        assert record.id
        assert record.user_id == "alice"
        assert record.direction == "UP"
        assert record.search_price == 150.0
        assert record.search_change == 1.5
        assert record.current_price == 150.0
        assert record.current_profit_loss == 0.0

    @pytest.mark.asyncio
    async def test_history_newest_first_per_user(self, session):
        await add_prediction(session, make_result("AAPL", minutes_ago=10), "alice")
        await add_prediction(session, make_result("MSFT", minutes_ago=0), "alice")
        await add_prediction(session, make_result("TSLA"), "bob")

        records = await get_prediction_history(session, "alice")
        assert [r.ticker for r in records] == ["MSFT", "AAPL"]

        limited = await get_prediction_history(session, "alice", limit=1)
        assert [r.ticker for r in limited] == ["MSFT"]

    @pytest.mark.asyncio
    async def test_update_current_price(self, session):
        record = await add_prediction(session, make_result(price=200.0))
        await update_current_price(session, record, 210.0)

        assert record.current_price == 210.0
        assert record.current_profit_loss == pytest.approx(5.0)
        assert record.updated_at is not None

    @pytest.mark.asyncio
    async def test_delete(self, session):
        record = await add_prediction(session, make_result())

        assert await delete_prediction(session, record.id) is True
        assert await get_prediction(session, record.id) is None
        assert await delete_prediction(session, record.id) is False

    @pytest.mark.asyncio
    async def test_delete_only_own_entries(self, session):
        record = await add_prediction(session, make_result(), "alice")

        assert await delete_prediction(session, record.id, "mallory") is False
        assert await get_prediction(session, record.id) is not None
        assert await delete_prediction(session, record.id, "alice") is True

    def test_profit_loss_percent(self):
        assert profit_loss_percent(100.0, 90.0) == pytest.approx(-10.0)


class TestHistoryEntry:
    """prediction_correct outcome."""

    @pytest.mark.asyncio
    async def test_outcome_from_price_move(self, session):
        up = await add_prediction(session, make_result(direction=Direction.UP))
        down = await add_prediction(session, make_result(direction=Direction.DOWN))

        assert HistoryEntry.model_validate(up).prediction_correct is None

        await update_current_price(session, up, 105.0)
        await update_current_price(session, down, 105.0)
        assert HistoryEntry.model_validate(up).prediction_correct is True
        assert HistoryEntry.model_validate(down).prediction_correct is False

        await update_current_price(session, down, 95.0)
        assert HistoryEntry.model_validate(down).prediction_correct is True


class TestRefreshHistoryPrices:
    """Re-quoting stored predictions."""

    @pytest.mark.asyncio
    async def test_refresh_updates_and_counts_failures(self, session):
        await add_prediction(session, make_result("AAPL", price=100.0), "carol")
        await add_prediction(session, make_result("MSFT", price=400.0), "carol")
        await add_prediction(session, make_result("GONE", price=10.0), "carol")

        data_service = FakeDataService(
            quotes={"AAPL": quote("AAPL", 110.0), "MSFT": quote("MSFT", 380.0)}
        )
        updated, failed = await refresh_history_prices(session, data_service, "carol")

        assert (updated, failed) == (2, 1)
        records = {r.ticker: r for r in await get_prediction_history(session, "carol")}
        assert records["AAPL"].current_profit_loss == pytest.approx(10.0)
        assert records["MSFT"].current_profit_loss == pytest.approx(-5.0)
        assert records["GONE"].current_price == 10.0

    @pytest.mark.asyncio
    async def test_refresh_empty_history(self, session):
        assert await refresh_history_prices(session, FakeDataService(), "nobody") == (0, 0)

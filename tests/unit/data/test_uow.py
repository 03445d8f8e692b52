"""Tests for the Unit of Work session lifecycle."""
import pytest

from ordering.data import UnitOfWork
from ordering.domain.exceptions import ControlError


class BrokenRollbackSession:
    """Session whose rollback fails, e.g. after the connection dropped."""

    def __init__(self) -> None:
        self.closed = False

    async def rollback(self) -> None:
        raise RuntimeError("connection lost")

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_session_closed_when_rollback_fails():
    session = BrokenRollbackSession()
    uow = UnitOfWork(lambda: session)

    with pytest.raises(RuntimeError, match="connection lost"):
        async with uow:
            raise ControlError("Order has no items")

    assert session.closed
    with pytest.raises(RuntimeError, match="not initialized"):
        uow.session


@pytest.mark.asyncio
async def test_session_closed_after_clean_exit():
    session = BrokenRollbackSession()

    async with UnitOfWork(lambda: session) as uow:
        assert uow.session is session

    assert session.closed

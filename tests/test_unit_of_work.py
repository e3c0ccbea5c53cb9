"""
Tests for the unit of work commit signal
"""

from sqlalchemy import select

from sales_api.utils.tx import UnitOfWork
from sales_api.v1_0.models import Customer


async def test_save_commits(db, session_factory):
    db.add(Customer(name="Acme", deleted=False))

    assert await UnitOfWork(db).save() is True

    async with session_factory() as other:
        names = (await other.execute(select(Customer.name))).scalars().all()
    assert names == ["Acme"]


async def test_save_reports_failure_and_rolls_back(db, session_factory):
    db.add(Customer(name=None, deleted=False))

    assert await UnitOfWork(db).save() is False

    # session stays usable after the rollback
    db.add(Customer(name="Acme", deleted=False))
    assert await UnitOfWork(db).save() is True

    async with session_factory() as other:
        names = (await other.execute(select(Customer.name))).scalars().all()
    assert names == ["Acme"]

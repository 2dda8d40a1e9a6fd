"""
Tests for CartRepository: default-empty reads and versioned saves.
"""
import uuid

import pytest
from sqlmodel import Session

from storefront.core.errors import Conflict
from storefront.core.locks import KeyedLocks
from storefront.repositories.cart_repo import CartRepository


@pytest.fixture
def repo() -> CartRepository:
    return CartRepository()


def test_get_without_document_returns_empty_cart(session, repo):
    user_id = uuid.uuid4()

    cart = repo.get(session, user_id)

    assert cart.user_id == user_id
    assert cart.lines == []
    assert cart.version == 0


def test_save_replaces_document_and_bumps_version(session, repo):
    user_id = uuid.uuid4()
    cart = repo.get(session, user_id)
    cart.lines = [{"product_id": str(uuid.uuid4()), "quantity": 2}]

    saved = repo.save(session, cart)
    saved.lines = []
    repo.save(session, saved)

    stored = repo.get(session, user_id)
    assert stored.lines == []
    assert stored.version == 2


def test_stale_write_loses_with_conflict(engine, repo):
    """
    Two writers read version 1; the second save must fail and leave the
    first writer's document in place.
    """
    user_id = uuid.uuid4()
    with Session(engine) as s:
        repo.create_empty(s, user_id)

    with Session(engine) as s1, Session(engine) as s2:
        first = repo.get(s1, user_id)
        second = repo.get(s2, user_id)

        first.lines = [{"product_id": "a", "quantity": 1}]
        repo.save(s1, first)

        second.lines = [{"product_id": "b", "quantity": 1}]
        with pytest.raises(Conflict):
            repo.save(s2, second)

    with Session(engine) as s:
        assert repo.get(s, user_id).lines == [{"product_id": "a", "quantity": 1}]


def test_racing_first_writes_conflict(engine, repo):
    user_id = uuid.uuid4()

    with Session(engine) as s1, Session(engine) as s2:
        first = repo.get(s1, user_id)
        second = repo.get(s2, user_id)

        repo.save(s1, first)
        with pytest.raises(Conflict):
            repo.save(s2, second)


def test_create_empty_is_idempotent(session, repo):
    user_id = uuid.uuid4()

    repo.create_empty(session, user_id)
    again = repo.create_empty(session, user_id)

    assert again.version == 1
    assert again.lines == []


def test_lock_timeout_raises_conflict():
    locks = KeyedLocks(timeout=0.05)
    key = uuid.uuid4()

    with locks.hold(key):
        with pytest.raises(Conflict):
            with locks.hold(key):
                pass


def test_lock_registry_is_emptied_after_release():
    locks = KeyedLocks(timeout=1.0)

    for _ in range(1000):
        with locks.hold(uuid.uuid4()):
            pass

    assert len(locks) == 0


def test_lock_entry_survives_while_another_holder_is_inside():
    locks = KeyedLocks(timeout=0.05)
    key = uuid.uuid4()

    with locks.hold(key):
        with pytest.raises(Conflict):
            with locks.hold(key):
                pass
        # timed-out waiter is gone, the holder's entry stays
        assert len(locks) == 1

    assert len(locks) == 0

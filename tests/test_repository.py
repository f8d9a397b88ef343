import pytest

from app.entity import Order
from app.errors import OrderAlreadyExistsError
from app.repository import SQLOrderRepository, create_schema


def _order(order_id, price=100.0, tax=10.0):
    order = Order(id=order_id, price=price, tax=tax)
    order.calculate_final_price()
    return order


def test_save_and_find_all(session):
    repo = SQLOrderRepository(session)

    repo.save(_order("b", 50.0, 5.0))
    repo.save(_order("a"))

    assert repo.find_all() == [
        Order(id="a", price=100.0, tax=10.0, final_price=110.0),
        Order(id="b", price=50.0, tax=5.0, final_price=55.0),
    ]


def test_find_all_empty(session):
    assert SQLOrderRepository(session).find_all() == []


def test_save_commits(session_factory):
    with session_factory() as session:
        SQLOrderRepository(session).save(_order("123"))

    with session_factory() as session:
        assert [o.id for o in SQLOrderRepository(session).find_all()] == ["123"]


def test_save_duplicate_id_raises(session):
    repo = SQLOrderRepository(session)
    repo.save(_order("123"))

    with pytest.raises(OrderAlreadyExistsError) as exc_info:
        repo.save(_order("123", 1.0, 1.0))

    assert exc_info.value.order_id == "123"
    # セッションはロールバック済みで引き続き使える
    assert repo.find_all() == [_order("123")]


def test_create_schema_is_repeatable(engine):
    create_schema(engine)

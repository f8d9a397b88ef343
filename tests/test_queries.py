from unittest.mock import Mock

from app.dto import OrderOutputDTO
from app.entity import Order
from app.queries import ListOrdersUseCase


def test_list_orders_maps_entities_to_dtos():
    order_repo = Mock()
    order_repo.find_all.return_value = [
        Order(id="1", price=10.0, tax=1.0, final_price=11.0),
        Order(id="2", price=20.0, tax=2.0, final_price=22.0),
    ]

    result = ListOrdersUseCase(order_repo).execute()

    assert result == [
        OrderOutputDTO(id="1", price=10.0, tax=1.0, final_price=11.0),
        OrderOutputDTO(id="2", price=20.0, tax=2.0, final_price=22.0),
    ]


def test_list_orders_empty():
    order_repo = Mock()
    order_repo.find_all.return_value = []

    assert ListOrdersUseCase(order_repo).execute() == []

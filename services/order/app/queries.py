"""
Order Service - クエリ側ユースケース (CQRS の Read 側)

読み取りは状態を変更せず、イベントも発行しない。
"""

from .dto import OrderOutputDTO
from .repository import OrderRepositoryProtocol


class ListOrdersUseCase:
    def __init__(self, order_repository: OrderRepositoryProtocol) -> None:
        self.order_repository = order_repository

    def execute(self) -> list[OrderOutputDTO]:
        """保存済みの全注文を出力 DTO にして返す。"""
        return [
            OrderOutputDTO.from_entity(order)
            for order in self.order_repository.find_all()
        ]

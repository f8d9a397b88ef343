"""
Order Service - 例外定義
"""


class OrderServiceError(Exception):
    """Order Service が送出する例外の基底クラス"""


class OrderAlreadyExistsError(OrderServiceError):
    """同じ ID の注文が既に保存されている"""

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order already exists: {order_id}")
        self.order_id = order_id


class HandlerAlreadyRegisteredError(OrderServiceError):
    """同じハンドラが同じイベント名で既に登録されている"""

    def __init__(self, event_name: str) -> None:
        super().__init__(f"Handler already registered for event: {event_name}")
        self.event_name = event_name

"""
Order Service - イベントハンドラ

OrderCreated を Redis Pub/Sub の order_events チャネルに発行し、
他サービスへ通知する。

注意: Redis Pub/Sub は fire-and-forget 方式。
購読者がいない間に発行されたイベントは失われる。
"""

import json
import logging

import redis

from .entity import Order
from .events import EventProtocol

logger = logging.getLogger(__name__)

ORDER_EVENTS_CHANNEL = "order_events"


class OrderCreatedHandler:
    """ペイロードが Order のイベントだけを扱う。"""

    def __init__(self, redis_client: redis.Redis) -> None:
        self.redis = redis_client

    def handle(self, event: EventProtocol) -> None:
        """
        ペイロードの注文を JSON にして発行する。

        ペイロードが Order でなければ TypeError。
        Redis の例外はそのまま伝播する。
        """
        order = event.get_payload()
        if not isinstance(order, Order):
            raise TypeError(
                f"{event.get_name()} payload must be Order, got {type(order).__name__}"
            )
        event_data = {
            "id": order.id,
            "price": order.price,
            "tax": order.tax,
            "final_price": order.final_price,
            "timestamp": event.get_date_time().isoformat(),
        }

        self.redis.publish(ORDER_EVENTS_CHANNEL, json.dumps({
            "event_type": event.get_name(),
            "data": event_data,
        }, default=str))
        logger.info("Published %s for order %s", event.get_name(), order.id)

"""
Order Service - イベント定義

ドメインで発生した事実(イベント)は過去形で命名する。
イベントは名前・発生日時・ペイロードを運ぶ封筒で、
ペイロードはディスパッチのたびに一度だけ設定される。
"""

from datetime import datetime, timezone
from typing import Any, Protocol


class EventProtocol(Protocol):
    """ディスパッチャが扱うイベントのインターフェース"""

    def get_name(self) -> str: ...

    def get_date_time(self) -> datetime: ...

    def get_payload(self) -> Any: ...

    def set_payload(self, payload: Any) -> None: ...


class EventHandlerProtocol(Protocol):
    """イベントを受け取って処理するハンドラのインターフェース"""

    def handle(self, event: EventProtocol) -> None: ...


class OrderCreated:
    """注文が作成された"""

    def __init__(self, name: str = "OrderCreated") -> None:
        self.name = name
        self.date_time = datetime.now(timezone.utc)
        self.payload: Any = None

    def get_name(self) -> str:
        return self.name

    def get_date_time(self) -> datetime:
        return self.date_time

    def get_payload(self) -> Any:
        return self.payload

    def set_payload(self, payload: Any) -> None:
        """ペイロードを設定し、発生日時を現在時刻に更新する。"""
        self.payload = payload
        self.date_time = datetime.now(timezone.utc)

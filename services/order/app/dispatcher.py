"""
Order Service - イベントディスパッチャ

イベント名 → ハンドラ一覧 の対応表を持ち、
dispatch されたイベントを登録順に同期実行する。

ハンドラの例外はそのまま呼び出し側へ伝播する。
(後続のハンドラは実行されない)
"""

import logging
from collections import defaultdict
from typing import Protocol

from .errors import HandlerAlreadyRegisteredError
from .events import EventHandlerProtocol, EventProtocol

logger = logging.getLogger(__name__)


class EventDispatcherProtocol(Protocol):
    """ユースケースが依存するディスパッチャのインターフェース"""

    def register(self, event_name: str, handler: EventHandlerProtocol) -> None: ...

    def dispatch(self, event: EventProtocol) -> None: ...

    def remove(self, event_name: str, handler: EventHandlerProtocol) -> None: ...

    def has(self, event_name: str, handler: EventHandlerProtocol) -> bool: ...

    def clear(self) -> None: ...


class EventDispatcher:
    """インメモリのディスパッチャ（単一プロセス用）"""

    def __init__(self) -> None:
        self.handlers: dict[str, list[EventHandlerProtocol]] = defaultdict(list)

    def register(self, event_name: str, handler: EventHandlerProtocol) -> None:
        """同じハンドラを同じイベント名で二重登録するとエラー。"""
        if self.has(event_name, handler):
            raise HandlerAlreadyRegisteredError(event_name)
        self.handlers[event_name].append(handler)

    def dispatch(self, event: EventProtocol) -> None:
        event_name = event.get_name()
        handlers = self.handlers.get(event_name, [])
        if not handlers:
            return
        logger.debug("Dispatching %s to %d handler(s)", event_name, len(handlers))
        for handler in list(handlers):
            handler.handle(event)

    def remove(self, event_name: str, handler: EventHandlerProtocol) -> None:
        """未登録のハンドラを指定しても何もしない。"""
        handlers = self.handlers.get(event_name)
        if not handlers:
            return
        self.handlers[event_name] = [h for h in handlers if h is not handler]

    def has(self, event_name: str, handler: EventHandlerProtocol) -> bool:
        return any(h is handler for h in self.handlers.get(event_name, []))

    def clear(self) -> None:
        self.handlers.clear()

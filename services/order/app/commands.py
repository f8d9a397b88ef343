"""
Order Service - コマンド側ユースケース (CQRS の Write 側)

注文作成ユースケースは 3 つのインターフェースにだけ依存する:
    リポジトリ / イベント / ディスパッチャ
具体的な実装(DB, Redis)は呼び出し側が注入する。
"""

from .dispatcher import EventDispatcherProtocol
from .dto import OrderInputDTO, OrderOutputDTO
from .entity import Order
from .events import EventProtocol
from .repository import OrderRepositoryProtocol


class CreateOrderUseCase:
    def __init__(
        self,
        order_repository: OrderRepositoryProtocol,
        order_created: EventProtocol,
        event_dispatcher: EventDispatcherProtocol,
    ) -> None:
        self.order_repository = order_repository
        self.order_created = order_created
        self.event_dispatcher = event_dispatcher

    def execute(self, input_dto: OrderInputDTO) -> OrderOutputDTO:
        """
        注文作成

        1. 入力から Order を組み立て、最終価格を計算
        2. リポジトリに保存
        3. OrderCreated のペイロードに保存した注文を設定してディスパッチ
        4. 出力 DTO を返す

        保存・ディスパッチの例外はそのまま呼び出し側へ伝播する。
        保存に失敗した場合はディスパッチしない。
        ディスパッチに失敗しても保存済みの注文は残る（補償はしない）。
        """
        order = Order(id=input_dto.id, price=input_dto.price, tax=input_dto.tax)
        order.calculate_final_price()

        self.order_repository.save(order)

        self.order_created.set_payload(order)
        self.event_dispatcher.dispatch(self.order_created)

        return OrderOutputDTO.from_entity(order)

"""
Order Service - 注文リポジトリ

ユースケースは OrderRepositoryProtocol にだけ依存する。
SQLOrderRepository はそれを SQLAlchemy のセッションで実装し、
orders テーブルに 1 注文 = 1 行で保存する。
"""

import logging
from typing import Protocol

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .entity import Order
from .errors import OrderAlreadyExistsError

logger = logging.getLogger(__name__)


class OrderRepositoryProtocol(Protocol):
    def save(self, order: Order) -> None: ...

    def find_all(self) -> list[Order]: ...


def create_schema(engine: Engine) -> None:
    """orders テーブルが無ければ作成する。"""
    with engine.begin() as conn:
        conn.execute(
            text("""
                CREATE TABLE IF NOT EXISTS orders (
                    id VARCHAR(255) PRIMARY KEY,
                    price FLOAT NOT NULL,
                    tax FLOAT NOT NULL,
                    final_price FLOAT NOT NULL
                )
            """)
        )


class SQLOrderRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, order: Order) -> None:
        """
        注文を 1 行追加してコミットする。

        同じ ID が既に存在すると主キー制約違反になる
        → ロールバックして OrderAlreadyExistsError を送出する。
        """
        try:
            self.session.execute(
                text("""
                    INSERT INTO orders (id, price, tax, final_price)
                    VALUES (:id, :price, :tax, :final_price)
                """),
                {
                    "id": order.id,
                    "price": order.price,
                    "tax": order.tax,
                    "final_price": order.final_price,
                },
            )
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise OrderAlreadyExistsError(order.id) from e
        logger.info("Saved order %s", order.id)

    def find_all(self) -> list[Order]:
        """全注文を ID 順に返す。"""
        result = self.session.execute(
            text("SELECT id, price, tax, final_price FROM orders ORDER BY id ASC"),
        )
        return [
            Order(
                id=row.id,
                price=float(row.price),
                tax=float(row.tax),
                final_price=float(row.final_price),
            )
            for row in result.fetchall()
        ]

"""
Order Service - DTO 定義

ユースケースの入出力境界で受け渡すデータ構造。
Pydantic が型を検証するので、ユースケースには検証済みの値だけが届く。
"""

from pydantic import BaseModel

from .entity import Order


class OrderInputDTO(BaseModel):
    """呼び出し側が渡す注文データ（導出値は含まない）"""
    id: str
    price: float
    tax: float


class OrderOutputDTO(BaseModel):
    """Order エンティティのレスポンス用射影"""
    id: str
    price: float
    tax: float
    final_price: float

    @classmethod
    def from_entity(cls, order: Order) -> "OrderOutputDTO":
        return cls(
            id=order.id,
            price=order.price,
            tax=order.tax,
            final_price=order.final_price,
        )

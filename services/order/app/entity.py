"""
Order Service - 注文エンティティ (Order Entity)

リクエストごとに入力 DTO から生成される。
final_price は price と tax から導出される値で、外から直接設定しない。
"""

from dataclasses import dataclass


@dataclass
class Order:
    """
    注文エンティティ

    不変条件:
        final_price == price + tax  (calculate_final_price() 実行後)
    """

    id: str
    price: float
    tax: float
    final_price: float = 0.0

    def calculate_final_price(self) -> None:
        """最終価格 = 価格 + 税 を計算する。何度呼んでも結果は同じ。"""
        self.final_price = self.price + self.tax

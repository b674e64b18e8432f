"""データモデル定義."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ssd_ranker.config import CURRENCY_SYMBOL


@dataclass
class ProductRecord:
    """商品カード1件から抽出した生テキスト."""

    name: str  # 商品名（トリム済み）
    raw_price_text: str  # 例: "2,499.00₾"
    raw_capacity_text: str  # 容量は商品名から読むため name と同じ


@dataclass
class NormalizedProduct:
    """正規化済みの商品. ランキング対象はこれだけ."""

    name: str
    price: int  # ラリ（小数部切り捨て）
    capacity_gb: int  # 1TB = 1000GB
    unit_price_per_gb: Decimal  # 小数点以下2桁

    @property
    def price_label(self) -> str:
        return f"{CURRENCY_SYMBOL}{self.price}"

    @property
    def capacity_label(self) -> str:
        return f"{self.capacity_gb} GB"

    @property
    def unit_price_label(self) -> str:
        return f"{self.unit_price_per_gb:.2f}"


@dataclass
class CrawlState:
    """ページ送りの制御値."""

    current_url: str | None
    page_index: int = 1

    def advance(self, next_url: str | None) -> CrawlState:
        """次ページの状態を返す. next_url が None ならクロール終了."""
        if next_url is None:
            return CrawlState(current_url=None, page_index=self.page_index)
        return CrawlState(current_url=next_url, page_index=self.page_index + 1)


@dataclass
class PageResult:
    """1ページ分の処理結果."""

    card_count: int  # 抽出成否に関係なく見つかった商品カード数
    products: list[NormalizedProduct] = field(default_factory=list)
    next_url: str | None = None


@dataclass
class CrawlResult:
    """クロール全体の結果."""

    products: list[NormalizedProduct] = field(default_factory=list)
    pages: int = 0

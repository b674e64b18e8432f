"""価格・容量テキストの正規化モジュール.

どの関数も例外を投げず、パースできない入力には None を返す。
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from ssd_ranker.config import CURRENCY_SYMBOL
from ssd_ranker.models import NormalizedProduct, ProductRecord

# "1TB" / "500 GB" / "2tb" など。最初の一致のみ使う
_CAPACITY_PATTERN = re.compile(r"(\d+)\s*(TB|GB)", re.IGNORECASE)

# TB → GB は 10 進 (SI) 換算。メーカー表記と同じ
_GB_PER_TB = 1000

_TWO_PLACES = Decimal("0.01")


def parse_price(text: str | None) -> int | None:
    """価格文字列から整数部のみを取り出す.

    "2,499.00₾" → 2499, "₾199.50" → 199。小数部は四捨五入せず切り捨てる。
    """
    if not text:
        return None

    cleaned = text.replace(CURRENCY_SYMBOL, "").replace(",", "")
    cleaned = cleaned.split(".", 1)[0].strip()
    if not cleaned.isdecimal():
        return None
    return int(cleaned)


def get_capacity_in_gb(name: str | None) -> int | None:
    """商品名から容量を GB 単位で取得する."""
    if not name:
        return None

    m = _CAPACITY_PATTERN.search(name)
    if not m:
        return None

    value = int(m.group(1))
    unit = m.group(2).upper()
    if unit == "TB":
        return value * _GB_PER_TB
    if unit == "GB":
        return value
    return None


def unit_price_per_gb(price: int, capacity_gb: int) -> Decimal:
    """GB 単価を小数点以下2桁（四捨五入）で返す."""
    return (Decimal(price) / Decimal(capacity_gb)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def normalize(record: ProductRecord) -> NormalizedProduct | None:
    """生レコードを正規化する. 価格か容量が取れなければ None."""
    price = parse_price(record.raw_price_text)
    capacity_gb = get_capacity_in_gb(record.raw_capacity_text)

    # 0 は取得失敗扱い（無料商品も除外される）
    if price is None or capacity_gb is None:
        return None
    if price <= 0 or capacity_gb <= 0:
        return None

    return NormalizedProduct(
        name=record.name,
        price=price,
        capacity_gb=capacity_gb,
        unit_price_per_gb=unit_price_per_gb(price, capacity_gb),
    )

"""GB 単価ランキングの並べ替えと出力."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ssd_ranker.models import NormalizedProduct

logger = logging.getLogger(__name__)

_HEADER_RULE = "-" * 42
_ENTRY_RULE = "-" * 50


def rank_products(products: list[NormalizedProduct]) -> list[NormalizedProduct]:
    """GB 単価の昇順に並べ替えた新しいリストを返す."""
    return sorted(products, key=lambda p: p.unit_price_per_gb)


def format_product(product: NormalizedProduct) -> str:
    return (
        f"Product: {product.name}\n"
        f"  Price: {product.price_label}\n"
        f"  Capacity: {product.capacity_label}\n"
        f"  Unit Price: ₾{product.unit_price_label} / GB\n"
        f"{_ENTRY_RULE}"
    )


def render_ranking(products: list[NormalizedProduct], stream: TextIO | None = None) -> None:
    """ランキングを stream（既定は標準出力）に書き出す. products は並べ替え済みであること."""
    if stream is None:
        stream = sys.stdout
    print(f"\n{_HEADER_RULE}", file=stream)
    print("Final SSD Ranking (Sorted by Price per GB)", file=stream)
    print(f"{_HEADER_RULE}\n", file=stream)
    for product in products:
        print(format_product(product), file=stream)


def report_ranking(products: list[NormalizedProduct], stream: TextIO | None = None) -> bool:
    """並べ替えて出力する. 商品が 0 件なら何も出力せず False."""
    if not products:
        logger.warning("商品が1件も見つかりませんでした。")
        return False

    logger.info("GB 単価で並べ替え中: %d 件", len(products))
    render_ranking(rank_products(products), stream)
    return True

"""pcshop.ge 商品一覧のスクレイピングモジュール.

処理単位:
  1. 一覧ページの HTML を取得
  2. 商品カード (li.product) から商品名・価格を抽出
  3. 「次へ」リンクを絶対 URL に解決し、無くなるまで繰り返す
"""

from __future__ import annotations

import logging
from typing import Callable
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from ssd_ranker.config import (
    NEXT_PAGE_SELECTOR,
    PRODUCT_CARD_SELECTOR,
    PRODUCT_PRICE_SELECTOR,
    PRODUCT_TITLE_SELECTOR,
    REQUEST_TIMEOUT,
)
from ssd_ranker.exceptions import NetworkError
from ssd_ranker.models import CrawlResult, CrawlState, PageResult, ProductRecord
from ssd_ranker.normalizer import normalize

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, str], str]


def fetch_page(url: str, user_agent: str) -> str:
    """一覧ページの HTML を取得する.

    Args:
        url: 絶対 URL
        user_agent: User-Agent ヘッダ

    Returns:
        HTML 文字列

    Raises:
        NetworkError: DNS・接続・タイムアウト・非 2xx のいずれか。リトライはしない。
    """
    headers = {
        "User-Agent": user_agent,
        "Accept-Language": "ka,en-US;q=0.9,en;q=0.8",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }

    try:
        resp = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        # charset 無しの text/html は ISO-8859-1 扱いになり ₾ が化ける
        if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
            resp.encoding = resp.apparent_encoding
        return resp.text
    except requests.RequestException as e:
        raise NetworkError(url, str(e)) from e


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def count_product_cards(soup: BeautifulSoup) -> int:
    """商品カードの数（抽出できたかどうかは問わない）."""
    return len(soup.select(PRODUCT_CARD_SELECTOR))


def parse_products(soup: BeautifulSoup) -> list[ProductRecord]:
    """商品カードから生レコードを抽出する.

    商品名か価格の要素が欠けたカードは黙ってスキップする。
    """
    records: list[ProductRecord] = []
    for card in soup.select(PRODUCT_CARD_SELECTOR):
        title = card.select_one(PRODUCT_TITLE_SELECTOR)
        price = card.select_one(PRODUCT_PRICE_SELECTOR)
        if title is None or price is None:
            continue

        name = title.get_text().strip()
        records.append(ProductRecord(
            name=name,
            raw_price_text=price.get_text().strip(),
            raw_capacity_text=name,
        ))

    return records


def find_next_page_url(soup: BeautifulSoup, base_url: str) -> str | None:
    """「次へ」リンクを base_url 基準の絶対 URL で返す. 無ければ None."""
    link = soup.select_one(NEXT_PAGE_SELECTOR)
    if link is None:
        return None

    href = (link.get("href") or "").strip()
    if not href:
        return None
    return urljoin(base_url, href)


def process_page(html: str, base_url: str) -> PageResult:
    """1ページ分の HTML を抽出・正規化する.

    商品カードが 0 件のページでは「次へ」リンクを見ない。
    """
    soup = parse_html(html)
    card_count = count_product_cards(soup)
    if card_count == 0:
        return PageResult(card_count=0)

    products = []
    for record in parse_products(soup):
        product = normalize(record)
        if product is not None:
            products.append(product)

    return PageResult(
        card_count=card_count,
        products=products,
        next_url=find_next_page_url(soup, base_url),
    )


def crawl(start_url: str, user_agent: str, fetch: Fetcher = fetch_page) -> CrawlResult:
    """start_url から「次へ」を辿って全ページの商品を集める.

    取得失敗時は NetworkError をそのまま送出し、途中までの結果は返さない。
    """
    state = CrawlState(current_url=start_url)
    products = []

    while state.current_url is not None:
        logger.info("ページ %d を取得中: %s", state.page_index, state.current_url)
        html = fetch(state.current_url, user_agent)

        page = process_page(html, start_url)
        logger.info("商品要素: %d 件", page.card_count)
        if page.card_count == 0:
            logger.info("商品が見つからないため、ページ送りを終了します。")
            break

        products.extend(page.products)
        logger.info("有効な商品: %d 件", len(page.products))

        if page.next_url is None:
            logger.info("「次へ」リンクがありません。最終ページです。")
        state = state.advance(page.next_url)

    logger.info("全 %d ページから取得した商品: %d 件", state.page_index, len(products))
    return CrawlResult(products=products, pages=state.page_index)

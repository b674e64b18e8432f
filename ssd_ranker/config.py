"""設定モジュール — 定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置（ログレベルのみ上書き可能）
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- クロール対象 ---
START_URL = "https://pcshop.ge/product-category/pc-hardware/ssd/?ep_filter_pa_brand=samsung"
ROBOTS_URL = "https://pcshop.ge/robots.txt"

# --- User-Agent ---
USER_AGENT = "MyAssignmentScraper/1.0"

# --- リクエスト設定 ---
REQUEST_TIMEOUT = 15  # 秒

# --- セレクタ (WooCommerce) ---
PRODUCT_CARD_SELECTOR = "li.product"
PRODUCT_TITLE_SELECTOR = "h2.woocommerce-loop-product__title"
PRODUCT_PRICE_SELECTOR = "span.woocommerce-Price-amount bdi"
NEXT_PAGE_SELECTOR = "a.next.page-numbers"

# --- 通貨 ---
CURRENCY_SYMBOL = "₾"

# --- ログ ---
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

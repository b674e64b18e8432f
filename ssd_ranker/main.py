"""pcshop.ge SSD 単価ランキング — メインエントリーポイント.

処理フロー:
  1. robots.txt で START_URL の取得が許可されているか確認
  2. 一覧ページを「次へ」が無くなるまで順に取得・抽出
  3. GB 単価の昇順に並べ替えて標準出力へ
"""

from __future__ import annotations

import logging
import sys
import time

from ssd_ranker.config import LOG_LEVEL, ROBOTS_URL, START_URL, USER_AGENT
from ssd_ranker.exceptions import NetworkError, PolicyDenied
from ssd_ranker.ranker import report_ranking
from ssd_ranker.robots import ensure_allowed
from ssd_ranker.scraper import crawl


def setup_logging() -> None:
    """ロギングの初期設定."""
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        # 不正な LOG_LEVEL は INFO 扱い
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run() -> int:
    """メイン処理. 終了コードを返す."""
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("=== SSD 単価ランキング 開始 ===")
    start_time = time.time()

    try:
        ensure_allowed(ROBOTS_URL, START_URL, USER_AGENT)
        result = crawl(START_URL, USER_AGENT)
        report_ranking(result.products)
    except PolicyDenied as e:
        logger.error("robots.txt によりクロール禁止: %s。終了します。", e)
        return 0
    except NetworkError as e:
        # 途中までの結果は出力しない
        logger.error("スクレイピング中にエラーが発生しました: %s", e)
        return 1

    elapsed = time.time() - start_time
    logger.info("=== SSD 単価ランキング 完了 (%.1f 秒) ===", elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(run())

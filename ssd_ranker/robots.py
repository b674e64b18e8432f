"""robots.txt による許可判定モジュール.

判定は Protego (RFC 9309) に任せる。ワイルドカード `*`・終端 `$`・
最長一致ルール優先・User-Agent グループの選択を含む。
"""

from __future__ import annotations

import logging

import requests
from protego import Protego

from ssd_ranker.config import REQUEST_TIMEOUT
from ssd_ranker.exceptions import NetworkError, PolicyDenied

logger = logging.getLogger(__name__)


def fetch_robots(robots_url: str, user_agent: str) -> str:
    """robots.txt を取得する.

    Raises:
        NetworkError: 取得失敗時（非 2xx を含む）
    """
    headers = {
        "User-Agent": user_agent,
        "Accept": "text/plain,*/*;q=0.8",
    }

    try:
        resp = requests.get(robots_url, headers=headers, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
        return resp.text
    except requests.RequestException as e:
        raise NetworkError(robots_url, str(e)) from e


def parse_robots(text: str) -> Protego:
    """robots.txt 本文をパースする. ルールが無い場合はすべて許可."""
    return Protego.parse(text)


def is_allowed(robots_url: str, target_url: str, user_agent: str) -> bool:
    """user_agent が target_url を取得してよいかを返す."""
    logger.info("robots.txt を確認中: %s", robots_url)
    rp = parse_robots(fetch_robots(robots_url, user_agent))
    return rp.can_fetch(target_url, user_agent)


def ensure_allowed(robots_url: str, target_url: str, user_agent: str) -> None:
    """許可されていなければ PolicyDenied を送出する."""
    if not is_allowed(robots_url, target_url, user_agent):
        raise PolicyDenied(user_agent, target_url)
    logger.info("クロールは許可されています。続行します。")

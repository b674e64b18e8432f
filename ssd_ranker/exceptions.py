"""クロール処理の例外定義."""


class NetworkError(Exception):
    """robots.txt・一覧ページの取得失敗（DNS・接続・タイムアウト・非 2xx）."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class PolicyDenied(Exception):
    """robots.txt によりクロールが許可されていない."""

    def __init__(self, user_agent: str, url: str):
        super().__init__(f"User-Agent {user_agent!r} は {url} へのアクセスを許可されていません")
        self.user_agent = user_agent
        self.url = url

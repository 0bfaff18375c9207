import os
from datetime import datetime

LOG_DIR_ENV = "LISTING_ORDER_LOG_DIR"
LOG_FILE_NAME = "last-run.txt"


def log_directory() -> str:
    """ログの出力先。環境変数が無ければ空文字 (出力しない)。"""
    explicit = os.getenv(LOG_DIR_ENV, "")
    if explicit:
        return explicit
    local = os.getenv("LOCALAPPDATA", "")
    if local:
        return os.path.join(local, "listing-order", "logs")
    return ""


def log_message(msg: str) -> None:
    """
    並び替えの判断をファイルに記録するグローバル関数
    """
    try:
        base = log_directory()
        if base:
            os.makedirs(base, exist_ok=True)
            with open(os.path.join(base, LOG_FILE_NAME), "a", encoding="utf-8", errors="ignore") as f:
                ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
                f.write(f"[{ts}] {msg}\n")
    except Exception:
        pass

"""godeprの設定管理。"""

from pathlib import Path

from pydantic_settings import BaseSettings


class CheckerConfig(BaseSettings):
    """チェッカー設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "GODEPR_"}

    rules_file: Path = Path(".godepr")
    log_level: str = "WARNING"

    # MCPサーバー (godepr serve)
    host: str = "127.0.0.1"
    port: int = 8000

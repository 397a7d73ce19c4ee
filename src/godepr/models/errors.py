"""godeprのカスタム例外クラス。"""

from pathlib import Path


class GodeprError(Exception):
    """godeprの基底例外クラス。"""


class MalformedInputError(GodeprError):
    """パッケージマニフェストのレコードを解釈できない場合の例外。"""

    def __init__(self, message: str, position: int, record_index: int) -> None:
        super().__init__(f"failed to decode package #{record_index} at offset {position}: {message}")
        self.position = position
        self.record_index = record_index


class RuleConfigError(GodeprError):
    """ルール設定ファイルの内容が不正な場合の例外。"""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Invalid rule configuration in {path}: {message}")
        self.path = path


class RulesFileNotFoundError(GodeprError):
    """ルール設定ファイルが見つからない場合の例外。"""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Rules file not found: {path}")
        self.path = path

"""パッケージマニフェスト（`go list -json` の出力）の読み込み。"""

import json
from typing import TextIO

from pydantic import ValidationError

from godepr.logging import get_logger
from godepr.models.errors import MalformedInputError
from godepr.models.package import Package

logger = get_logger(__name__)

_WHITESPACE = " \t\n\r"


def parse_packages(text: str) -> list[Package]:
    """連結されたJSONオブジェクト列をパッケージのリストに変換する。

    `go list -json` はレコードを配列で囲まずに出力するため、
    1件ずつ区切りを判定しながらデコードする。空入力は空リストになる。

    Args:
        text: マニフェスト文字列。

    Returns:
        入力順のパッケージリスト。

    Raises:
        MalformedInputError: いずれかのレコードを解釈できない場合。
            部分的な結果は返さない。
    """
    decoder = json.JSONDecoder()
    packages: list[Package] = []
    pos = _skip_whitespace(text, 0)

    while pos < len(text):
        index = len(packages)
        try:
            data, end = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            raise MalformedInputError(e.msg, e.pos, index) from e
        except RecursionError as e:
            raise MalformedInputError(str(e), pos, index) from e

        try:
            packages.append(Package.model_validate(data))
        except ValidationError as e:
            raise MalformedInputError(_describe(e), pos, index) from e

        pos = _skip_whitespace(text, end)

    logger.debug("Loaded %d packages from manifest", len(packages))
    return packages


def load_packages(stream: TextIO) -> list[Package]:
    """ストリームからマニフェストを読み込む。

    Raises:
        MalformedInputError: ストリームを文字列として読み込めない場合も含む。
    """
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"invalid {e.encoding} input: {e.reason}", e.start, 0) from e
    return parse_packages(text)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "record"
    return f"{location}: {first['msg']}"

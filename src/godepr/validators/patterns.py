"""importパスと拒否パターンの照合。"""

WILDCARD = "*"


def matches_pattern(import_path: str, pattern: str) -> bool:
    """importパスがパターンに一致するかどうかを判定する。

    末尾が ``*`` のパターンは、``*`` を1つ取り除いた文字列による
    単純な前方一致になる（パスのセグメント境界は考慮しない）。
    それ以外は完全一致。
    """
    if pattern.endswith(WILDCARD):
        return import_path.startswith(pattern.removesuffix(WILDCARD))
    return import_path == pattern

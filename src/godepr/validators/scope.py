"""ルールの適用範囲（ディレクトリスコープ）の判定。

パッケージのディレクトリは絶対パスでも相対パスでもよく、ルールの
ディレクトリはパスの断片として書かれる。そのため厳密な祖先判定ではなく、
次の3つの条件のいずれかを満たせばスコープ内とみなす。

1. 前方一致: パッケージディレクトリがルールディレクトリで始まる。
2. 末尾セグメント一致: パッケージディレクトリが ``/<rule>/`` で終わる。
3. セグメント包含: パッケージディレクトリが ``/<rule>/`` を含む。

3は2を包含するが、既存の判定結果を変えないためにそれぞれを独立した
条件として残している。無関係な階層に同名のディレクトリがある場合も
スコープ内と判定される点に注意。
"""

SEPARATOR = "/"


def normalize_directory(directory: str) -> str:
    """末尾に区切り文字がなければ付与する。"""
    if not directory.endswith(SEPARATOR):
        directory += SEPARATOR
    return directory


def _bounded_segment(rule_directory: str) -> str:
    return SEPARATOR + normalize_directory(rule_directory).removesuffix(SEPARATOR) + SEPARATOR


def has_prefix_match(package_dir: str, rule_directory: str) -> bool:
    return normalize_directory(package_dir).startswith(normalize_directory(rule_directory))


def has_suffix_segment_match(package_dir: str, rule_directory: str) -> bool:
    return normalize_directory(package_dir).endswith(_bounded_segment(rule_directory))


def has_contains_segment_match(package_dir: str, rule_directory: str) -> bool:
    return _bounded_segment(rule_directory) in normalize_directory(package_dir)


def is_in_scope(package_dir: str, rule_directory: str) -> bool:
    """パッケージディレクトリがルールのスコープ内かどうかを判定する。

    Args:
        package_dir: パッケージのディレクトリ（`go list` の Dir）。
        rule_directory: ルールの directory。

    Returns:
        3つの条件のいずれかを満たせばTrue。
    """
    return (
        has_prefix_match(package_dir, rule_directory)
        or has_suffix_segment_match(package_dir, rule_directory)
        or has_contains_segment_match(package_dir, rule_directory)
    )

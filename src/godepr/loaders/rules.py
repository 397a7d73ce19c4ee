"""ルール設定ファイル（.godepr）の読み込み。"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from godepr.logging import get_logger
from godepr.models.errors import RuleConfigError, RulesFileNotFoundError
from godepr.models.rules import Rule, RuleConfig

logger = get_logger(__name__)


def parse_rule_config(data: Any, source: Path) -> RuleConfig:
    """YAMLから読み込んだデータをRuleConfigに変換する。"""
    if data is None:
        return RuleConfig()
    try:
        return RuleConfig.model_validate(data)
    except ValidationError as e:
        raise RuleConfigError(source, str(e)) from e


def load_rule_config(path: Path) -> RuleConfig:
    """ルール設定ファイルを読み込む。

    JSONはYAMLのサブセットなので、どちらの記法のファイルでも読み込める。

    Raises:
        RulesFileNotFoundError: ファイルが存在しない場合。
        RuleConfigError: ファイルの構文や構造が不正な場合。
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RulesFileNotFoundError(path) from None
    except yaml.YAMLError as e:
        raise RuleConfigError(path, str(e)) from e

    config = parse_rule_config(data, path)
    logger.debug("Loaded %d rules from %s", len(config.rules), path)
    return config


def load_rules(path: Path) -> list[Rule]:
    """ルール設定ファイルからルールのリストを読み込む。"""
    return load_rule_config(path).rules

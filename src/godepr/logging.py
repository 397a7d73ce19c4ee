"""godepr全体のロギング設定。

Usage:
    from godepr.logging import get_logger
    logger = get_logger(__name__)

Environment variables:
    GODEPR_LOG_LEVEL: ログレベル（DEBUG, INFO, WARNING, ERROR）。デフォルトはWARNING。
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.WARNING

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

ROOT_LOGGER_NAME = "godepr"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def parse_level(name: str | None) -> int:
    """レベル名をloggingの数値レベルに変換する。未知の名前はデフォルト値。"""
    return _LEVELS.get((name or "").upper(), DEFAULT_LOG_LEVEL)


def configure_logging(level: int | None = None) -> None:
    """godepr名前空間のロガーを設定する。2回目以降の呼び出しは何もしない。

    Args:
        level: ログレベル。Noneの場合はGODEPR_LOG_LEVEL環境変数から決定する。
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = parse_level(os.environ.get("GODEPR_LOG_LEVEL"))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """モジュール名に対応するgodepr配下のロガーを返す。"""
    configure_logging()
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int) -> None:
    """実行時にログレベルを変更する。"""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT))

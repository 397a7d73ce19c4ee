"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest
import yaml

from godepr.config import CheckerConfig
from godepr.models.package import Package
from godepr.models.rules import Rule
from godepr.services.check import CheckService


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def example_package() -> Package:
    """exampleディレクトリ配下のパッケージ。"""
    return Package(
        import_path="testproject/example",
        dir="/project/example/",
        imports=["fmt", "github.com/blocked/package", "internal/allowed/package"],
    )


@pytest.fixture
def blocked_rule() -> Rule:
    """github.com/blocked/* を拒否するルール。"""
    return Rule(directory="example/", kind="denied-list", body=["github.com/blocked/*"])


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    """テスト用ルールファイル。"""
    path = tmp_path / ".godepr"
    path.write_text(
        yaml.safe_dump(
            {
                "rules": [
                    {
                        "directory": "example/",
                        "ruletype": "denied-list",
                        "rulebody": ["github.com/blocked/*"],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def check_service(rules_file: Path) -> CheckService:
    """テスト用CheckService。"""
    return CheckService(rules_file=rules_file)


@pytest.fixture
def server_config(rules_file: Path) -> CheckerConfig:
    """テスト用CheckerConfig。"""
    return CheckerConfig(rules_file=rules_file)

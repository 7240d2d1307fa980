"""설정 타입 (Pydantic + YAML)"""
import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from tgui_common.errors import ConfigError
from tgui_common.types import LogLevel
from tgui_common.result import Result, Success, Failure, bind, unwrap_or_else

logger = logging.getLogger(__name__)


# ============================================================
# 설정 모델
# ============================================================

class MapConfig(BaseModel):
    """map() 동작 설정"""
    # False면 None도 순회 불가 타입으로 거부
    null_passthrough: bool = True

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: LogLevel = "WARNING"
    rich: bool = True

    model_config = {"frozen": True}


class CommonConfig(BaseModel):
    """전체 설정"""
    map: MapConfig = Field(default_factory=MapConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


class EnvSettings(BaseSettings):
    """환경 변수 (TGUI_COMMON_*)"""
    config: Path | None = None

    model_config = SettingsConfigDict(env_prefix="TGUI_COMMON_")


DEFAULT_PATHS = (
    Path("tgui-common.yaml"),
    Path("tgui-common.yml"),
    Path.home() / ".config" / "tgui-common" / "config.yaml",
)


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

def load_yaml(path: Path) -> Result[dict, ConfigError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Failure(ConfigError(
            field="config_path",
            message=f"Config file not found: {path}",
        ))
    except yaml.YAMLError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))
    except (OSError, UnicodeDecodeError) as e:
        return Failure(ConfigError(
            field="config_path",
            message=f"Cannot read config file {path}: {e}",
        ))

    if data is None:
        return Success({})
    if not isinstance(data, dict):
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Expected a mapping at top level, got {type(data).__name__}",
        ))
    return Success(data)


def parse_config(data: dict) -> Result[CommonConfig, ConfigError]:
    """딕셔너리를 CommonConfig로 파싱"""
    try:
        return Success(CommonConfig(**data))
    except ValidationError as e:
        return Failure(ConfigError(
            field="config",
            message=str(e),
        ))


def find_config_path() -> Path | None:
    """설정 파일 경로 탐색 (환경 변수 > 기본 경로)"""
    env_path = EnvSettings().config
    if env_path is not None:
        return env_path
    for p in DEFAULT_PATHS:
        if p.exists():
            return p
    return None


def load_config(path: Path | str | None = None) -> Result[CommonConfig, ConfigError]:
    """
    설정 로드 (YAML + 기본값)

    path가 없으면 TGUI_COMMON_CONFIG, 기본 경로 순으로 찾는다.
    """
    if path is None:
        path = find_config_path()

    if path is None:
        return Success(CommonConfig())

    return bind(load_yaml(Path(path)), parse_config)


def merge_config(base: CommonConfig, overrides: dict) -> CommonConfig:
    """설정 병합"""
    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    return CommonConfig(**deep_merge(base.model_dump(), overrides))


def _fallback(error: ConfigError) -> CommonConfig:
    logger.warning("Using default config (%s: %s)", error.field, error.message)
    return CommonConfig()


@lru_cache(maxsize=1)
def get_config() -> CommonConfig:
    """프로세스 전역 설정 (캐시됨)"""
    return unwrap_or_else(load_config(), _fallback)

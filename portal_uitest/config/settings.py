# config/settings.py
import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from portal_uitest.core.errors import ConfigError

load_dotenv(Path(os.getenv('PROJECT_ROOT', os.getcwd())) / '.env')

SCREENSHOT_STRATEGIES = ('onFailure', 'always')


class Config:
    PROJECT_ROOT = Path(os.getenv('PROJECT_ROOT', os.getcwd()))
    TEST_ENV = os.getenv('TEST_ENV', 'qa').lower()
    SCREENSHOT_STRATEGY = os.getenv('SCREENSHOT_STRATEGY')
    HEADLESS = os.getenv('HEADLESS', 'true').lower() == 'true'
    BROWSER = os.getenv('BROWSER', 'chrome').lower()
    CONFIG_DIR = Path(os.getenv('CONFIG_DIR', PROJECT_ROOT / 'resources' / 'configs'))
    UPLOAD_DIR = Path(os.getenv('UPLOAD_DIR', PROJECT_ROOT / 'resources' / 'upload'))
    LOG_DIR = Path(os.getenv('LOG_DIR', PROJECT_ROOT / 'logs'))
    FAILED_TESTS_FILE = Path(os.getenv('FAILED_TESTS_FILE', LOG_DIR / 'failed' / 'failed-tests.txt'))
    ALLURE_RESULTS_DIR = Path(os.getenv('ALLURE_RESULTS_DIR', PROJECT_ROOT / 'allure-results'))
    REPORTS_DIR = Path(os.getenv('REPORTS_DIR', PROJECT_ROOT / 'reports'))
    TESTS_DIR = Path(os.getenv('TESTS_DIR', PROJECT_ROOT / 'features' / 'tests'))


@dataclass(frozen=True)
class EnvConfig:
    env_name: str
    base_url: str
    portal_url: str


@dataclass(frozen=True)
class FrameworkConfig:
    default_timeout: int = 10000
    retry_count: int = 3
    screenshot_strategy: str = 'onFailure'

    def __post_init__(self):
        if self.retry_count < 1:
            raise ConfigError(f"retryCount must be at least 1, got {self.retry_count}")
        if self.default_timeout < 0:
            raise ConfigError(f"defaultTimeout must not be negative, got {self.default_timeout}")
        if self.screenshot_strategy not in SCREENSHOT_STRATEGIES:
            raise ConfigError(
                f"Unknown screenshotStrategy '{self.screenshot_strategy}', expected one of {SCREENSHOT_STRATEGIES}"
            )

    @property
    def always_screenshot(self) -> bool:
        return self.screenshot_strategy == 'always'


def _read_json(path: Path) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object, got {type(data).__name__}")
    return data


def _read_int(raw: dict, key: str, default: int, path: Path) -> int:
    try:
        return int(raw.get(key, default))
    except (TypeError, ValueError):
        raise ConfigError(f"{key} in {path} must be an integer, got {raw.get(key)!r}")


def load_env_config(env: Optional[str] = None, config_dir: Optional[Path] = None) -> EnvConfig:
    env = (env or Config.TEST_ENV).lower()
    path = Path(config_dir or Config.CONFIG_DIR) / f"env.{env}.json"
    raw = _read_json(path)
    try:
        return EnvConfig(
            env_name=raw.get('envName', env),
            base_url=raw['baseUrl'],
            portal_url=raw['portalUrl'],
        )
    except KeyError as e:
        raise ConfigError(f"Missing key {e} in {path}")


def load_framework_config(config_dir: Optional[Path] = None,
                          screenshot_strategy: Optional[str] = None) -> FrameworkConfig:
    path = Path(config_dir or Config.CONFIG_DIR) / 'framework.config.json'
    raw = _read_json(path)
    defaults = FrameworkConfig()
    return FrameworkConfig(
        default_timeout=_read_int(raw, 'defaultTimeout', defaults.default_timeout, path),
        retry_count=_read_int(raw, 'retryCount', defaults.retry_count, path),
        screenshot_strategy=screenshot_strategy or raw.get('screenshotStrategy', defaults.screenshot_strategy),
    )


@lru_cache(maxsize=None)
def get_env_config() -> EnvConfig:
    return load_env_config()


@lru_cache(maxsize=None)
def get_framework_config() -> FrameworkConfig:
    return load_framework_config(screenshot_strategy=Config.SCREENSHOT_STRATEGY)

import os
import json
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger("MySite.Config")

load_dotenv()

DEFAULT_CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../config/config.json'))


class Settings(BaseModel):
    """서버 실행 설정 (config.json -> 환경변수 -> CLI 순으로 덮어씀)"""
    host: str = "0.0.0.0"
    port: int = Field(default=3333, ge=0, le=65535)
    log_level: str = "INFO"
    translation_base_url: str = "https://api.mymemory.translated.net"


def _read_config_file(config_path: str) -> Dict[str, Any]:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug(f"Config file not found, using defaults: {config_path}")
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(config_path: Optional[str] = None) -> Settings:
    data = _read_config_file(config_path or DEFAULT_CONFIG_PATH)

    values: Dict[str, Any] = {}
    server = data.get('server_settings', {}) or {}
    for key in ('host', 'port', 'log_level'):
        if key in server:
            values[key] = server[key]
    translation = data.get('translation', {}) or {}
    if 'base_url' in translation:
        values['translation_base_url'] = translation['base_url']

    # Environment overrides
    env_host = os.getenv("MYSITE_HOST")
    if env_host: values['host'] = env_host
    env_port = os.getenv("MYSITE_PORT")
    if env_port: values['port'] = env_port
    env_level = os.getenv("MYSITE_LOG_LEVEL")
    if env_level: values['log_level'] = env_level
    env_base_url = os.getenv("TRANSLATION_BASE_URL")
    if env_base_url: values['translation_base_url'] = env_base_url

    settings = Settings(**values)
    settings.log_level = settings.log_level.upper()
    settings.translation_base_url = settings.translation_base_url.rstrip('/')
    return settings

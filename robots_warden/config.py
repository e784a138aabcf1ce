# === FILE: robots_warden/config.py ===
"""
Модуль для загрузки и валидации конфигурации загрузчика robots.txt.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux i686; rv:5.0) Gecko/20100101 Firefox/5.0"


class FetcherConfig(BaseModel):
    """Параметры загрузки robots.txt."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    redirect_limit: int = Field(5, ge=0, description="Сколько редиректов 301/302 можно пройти.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    request_options: Dict[str, Any] = Field(
        default_factory=dict, description="Доп. аргументы запроса, передаются как есть."
    )

    @field_validator("request_options")
    def _check_headers_mapping(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        headers = v.get("headers")
        if headers is not None and not isinstance(headers, dict):
            raise ValueError("request_options.headers должен быть mapping")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> FetcherConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект FetcherConfig.
    Без пути использует configs/default.yaml, а если его нет, то значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return FetcherConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return FetcherConfig(**data)

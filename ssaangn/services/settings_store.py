from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

from ssaangn.domain.positioned_cipher import DEFAULT_MUL1, DEFAULT_MUL2, CipherKeying

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the cipher keying and log level

    Notes:
      - A missing or malformed file is not an error; defaults are returned.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to write settings %s: %s", self._path, e)

    def get_cipher_keying(self) -> CipherKeying:
        s = self.load()
        c = s.get("cipher") or {}
        if not isinstance(c, dict):
            c = {}

        def _ival(key: str, default: int) -> int:
            v = c.get(key, default)
            # bool is an int subclass; reject it explicitly
            if isinstance(v, int) and not isinstance(v, bool):
                return v
            logger.debug("Ignoring non-integer cipher.%s=%r", key, v)
            return default

        return CipherKeying(
            mul1=_ival("mul1", DEFAULT_MUL1),
            mul2=_ival("mul2", DEFAULT_MUL2),
        )

    def set_cipher_keying(self, keying: CipherKeying) -> None:
        s = self.load()
        s["cipher"] = {"mul1": int(keying.mul1), "mul2": int(keying.mul2)}
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level", DEFAULT_LOG_LEVEL)
        level = str(v).strip().upper()
        if level in _VALID_LOG_LEVELS:
            return level
        logger.debug("Unknown log_level %r; using %s", v, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL

    def set_log_level(self, level: str) -> None:
        s = self.load()
        s["log_level"] = str(level).strip().upper()
        self.save(s)

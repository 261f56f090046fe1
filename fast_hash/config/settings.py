from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from fast_hash.core.digest import DEFAULT_CHUNK_SIZE

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SettingsError(ValueError):
    """Raised when a settings file cannot be used."""


@dataclass(slots=True)
class HashingSettings:
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass(slots=True)
class EvidenceSettings:
    external_tool: str = "fast-hash"
    prefer_external: bool = True
    timeout_s: int = 300


@dataclass(slots=True)
class AppSettings:
    log_level: str = "WARNING"
    hashing: HashingSettings = field(default_factory=HashingSettings)
    evidence: EvidenceSettings = field(default_factory=EvidenceSettings)


def _section(cls: type, content: dict[str, Any], name: str) -> Any:
    raw = content.get(name, {})
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise SettingsError(f"Section '{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise SettingsError(f"Unknown keys in '{name}': {', '.join(unknown)}")
    return cls(**raw)


class SettingsLoader:
    @staticmethod
    def _loads(text: str) -> dict[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid YAML: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise SettingsError("Invalid configuration")
        return data

    @staticmethod
    def _dumps(payload: dict[str, Any]) -> str:
        return yaml.safe_dump(payload, sort_keys=False)

    @staticmethod
    def load(path: str | Path) -> AppSettings:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read configuration: {exc}") from exc
        content = SettingsLoader._loads(text)

        unknown = sorted(set(content) - {"log_level", "hashing", "evidence"})
        if unknown:
            raise SettingsError(f"Unknown keys: {', '.join(unknown)}")

        hashing = _section(HashingSettings, content, "hashing")
        evidence = _section(EvidenceSettings, content, "evidence")

        chunk_size = hashing.chunk_size
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
            raise SettingsError("hashing.chunk_size must be a positive integer")

        if not isinstance(evidence.external_tool, str) or not evidence.external_tool.strip():
            raise SettingsError("evidence.external_tool must be a non-empty string")
        if not isinstance(evidence.prefer_external, bool):
            raise SettingsError("evidence.prefer_external must be true or false")
        timeout_s = evidence.timeout_s
        if isinstance(timeout_s, bool) or not isinstance(timeout_s, int) or timeout_s <= 0:
            raise SettingsError("evidence.timeout_s must be a positive integer")

        log_level = str(content.get("log_level", "WARNING"))
        if log_level.upper() not in LOG_LEVELS:
            raise SettingsError(f"Unsupported log_level: {log_level}")

        return AppSettings(
            log_level=log_level,
            hashing=hashing,
            evidence=evidence,
        )

    @staticmethod
    def dump_default(path: str | Path) -> None:
        defaults = AppSettings()
        payload: dict[str, Any] = {
            "log_level": defaults.log_level,
            "hashing": asdict(defaults.hashing),
            "evidence": asdict(defaults.evidence),
        }
        Path(path).write_text(SettingsLoader._dumps(payload), encoding="utf-8")

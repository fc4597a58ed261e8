"""Core configuration dataclasses.

We keep config file I/O outside the core, but these dataclasses define the
shape the core expects so adapters and the app layer can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings read from the optional "logging" config section."""

    enabled: bool = False
    level: str = "INFO"
    console: bool = True
    file_enabled: bool = False
    file_path: str = "logs/tertestrial.log"
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "LoggingConfig":
        raw = raw or {}
        file_cfg = raw.get("file", {}) or {}
        return cls(
            enabled=bool(raw.get("enabled", False)),
            level=str(raw.get("level", "INFO")).upper(),
            console=bool(raw.get("console", True)),
            file_enabled=bool(file_cfg.get("enabled", False)),
            file_path=str(file_cfg.get("path", "logs/tertestrial.log")),
            max_bytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backup_count=int(file_cfg.get("backup_count", 5)),
        )

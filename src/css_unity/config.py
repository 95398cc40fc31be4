from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CSSUnityConfig:
    mhtml_uri: str | None = None  # None derives it from the request in service mode
    recursive: bool = False
    encoding: str = "utf-8"
    host: str = "127.0.0.1"
    port: int = 5000

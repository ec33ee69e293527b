from __future__ import annotations

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[2]


def _unquote_env_value(value: str) -> str:
    stripped = value.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in {"'", '"'}:
        return stripped[1:-1]
    return stripped


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        os.environ[key] = _unquote_env_value(raw_value)


def _base_url(name: str, default: str) -> str:
    return ((os.getenv(name) or "").strip() or default).rstrip("/")


_load_env_file(ROOT_DIR / ".env")

REQUEST_TIMEOUT_SECONDS = int(os.getenv("DOWNLOAD_BADGES_TIMEOUT_SECONDS", "30"))
LOG_LEVEL = (os.getenv("DOWNLOAD_BADGES_LOG_LEVEL") or "INFO").strip().upper() or "INFO"

DUB_API_BASE = _base_url("DUB_API_BASE", "https://code.dlang.org/api")
WORDPRESS_API_BASE = _base_url("WORDPRESS_API_BASE", "https://api.wordpress.org")

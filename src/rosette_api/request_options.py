"""Per-call overrides for the Rosette clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class RequestOptions:
    timeout: float | None = None
    max_retries: int | None = None
    headers: Mapping[str, str] | None = None

"""Server configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .pipeline import BLOCK_SIZE

DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)


@dataclass(frozen=True)
class ServerConfig:
    block_size: int = BLOCK_SIZE
    threshold: Optional[int] = None  # None keeps continuous gray
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    max_content_length: int = 16 * 1024 * 1024
    host: str = "127.0.0.1"
    port: int = 8080

    def __post_init__(self):
        if self.block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {self.block_size}")
        if self.threshold is not None and not 0 <= self.threshold <= 255:
            raise ValueError(f"threshold must be 0-255, got {self.threshold}")
        if self.max_content_length <= 0:
            raise ValueError("max_content_length must be > 0")
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be 1-65535, got {self.port}")

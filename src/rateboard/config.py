"""Application configuration builder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .db.db_init import init_db


@dataclass(slots=True)
class UploadLimits:
    allowed_content_types: Sequence[str]
    max_bytes: int
    max_files: int
    chunk_size_bytes: int


@dataclass(slots=True)
class UploadPolicy:
    media: UploadLimits
    promo: UploadLimits
    banner: UploadLimits


@dataclass(slots=True)
class AppConfig:
    upload_policy: UploadPolicy
    database_url: str
    engine: Engine
    session_factory: sessionmaker[Session]
    display_timezone: str


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_upload_policy() -> UploadPolicy:
    chunk_size = int(os.getenv("UPLOAD_CHUNK_SIZE_BYTES", 1 * 1024 * 1024))
    return UploadPolicy(
        media=UploadLimits(
            allowed_content_types=(
                "image/jpeg",
                "image/png",
                "image/gif",
                "video/mp4",
                "video/avi",
                "video/mov",
            ),
            max_bytes=int(os.getenv("MEDIA_UPLOAD_MAX_BYTES", 50 * 1024 * 1024)),
            max_files=10,
            chunk_size_bytes=chunk_size,
        ),
        promo=UploadLimits(
            allowed_content_types=("image/jpeg", "image/png", "image/gif"),
            max_bytes=int(os.getenv("PROMO_UPLOAD_MAX_BYTES", 10 * 1024 * 1024)),
            max_files=10,
            chunk_size_bytes=chunk_size,
        ),
        banner=UploadLimits(
            allowed_content_types=("image/jpeg", "image/png"),
            max_bytes=int(os.getenv("BANNER_UPLOAD_MAX_BYTES", 5 * 1024 * 1024)),
            max_files=1,
            chunk_size_bytes=chunk_size,
        ),
    )


def load_config() -> AppConfig:
    """Load configuration from environment (SQLite by default)."""
    database_url = os.getenv("DATABASE_URL", "sqlite:///rateboard.db")
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    engine = create_engine(database_url, future=True, connect_args=connect_args)
    session_factory: sessionmaker[Session] = sessionmaker(bind=engine, expire_on_commit=False)

    init_db(
        engine,
        session_factory,
        seed_defaults=_env_flag("RATEBOARD_SEED_DEFAULTS", True),
    )

    return AppConfig(
        upload_policy=load_upload_policy(),
        database_url=database_url,
        engine=engine,
        session_factory=session_factory,
        display_timezone=os.getenv("DISPLAY_TIMEZONE", "Asia/Kolkata"),
    )

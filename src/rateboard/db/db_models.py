"""SQLAlchemy ORM models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base declarative class."""


class GoldRateModel(Base):
    __tablename__ = "gold_rates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gold_24k_sale: Mapped[float] = mapped_column(Float, nullable=False)
    gold_24k_purchase: Mapped[float] = mapped_column(Float, nullable=False)
    gold_22k_sale: Mapped[float] = mapped_column(Float, nullable=False)
    gold_22k_purchase: Mapped[float] = mapped_column(Float, nullable=False)
    gold_18k_sale: Mapped[float] = mapped_column(Float, nullable=False)
    gold_18k_purchase: Mapped[float] = mapped_column(Float, nullable=False)
    silver_per_kg_sale: Mapped[float] = mapped_column(Float, nullable=False)
    silver_per_kg_purchase: Mapped[float] = mapped_column(Float, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    created_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)


class DisplaySettingsModel(Base):
    __tablename__ = "display_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    orientation: Mapped[str] = mapped_column(String(16), default="horizontal", nullable=False)
    background_color: Mapped[str] = mapped_column(String(32), default="#FFF8E1", nullable=False)
    text_color: Mapped[str] = mapped_column(String(32), default="#212529", nullable=False)
    rate_number_font_size: Mapped[str] = mapped_column(String(32), default="text-4xl", nullable=False)
    show_media: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    rates_display_duration_seconds: Mapped[int] = mapped_column(Integer, default=15, nullable=False)
    refresh_interval: Mapped[int] = mapped_column(Integer, default=30, nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)


class MediaItemModel(Base):
    __tablename__ = "media_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_url: Mapped[str | None] = mapped_column(String(1024))
    file_data: Mapped[str | None] = mapped_column(Text)  # base64
    media_type: Mapped[str] = mapped_column(String(16), nullable=False)  # image|video
    duration_seconds: Mapped[int] = mapped_column(Integer, default=30, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    file_size: Mapped[int | None] = mapped_column(Integer)
    mime_type: Mapped[str | None] = mapped_column(String(128))
    created_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)


class PromoImageModel(Base):
    __tablename__ = "promo_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024))
    image_data: Mapped[str | None] = mapped_column(Text)  # base64
    duration_seconds: Mapped[int] = mapped_column(Integer, default=5, nullable=False)
    transition_effect: Mapped[str] = mapped_column(String(32), default="fade", nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    file_size: Mapped[int | None] = mapped_column(Integer)
    mime_type: Mapped[str | None] = mapped_column(String(128))
    created_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)


class BannerSettingsModel(Base):
    __tablename__ = "banner_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    banner_image_url: Mapped[str | None] = mapped_column(String(1024))
    banner_image_data: Mapped[str | None] = mapped_column(Text)  # base64
    banner_height: Mapped[int] = mapped_column(Integer, default=120, nullable=False)
    mime_type: Mapped[str | None] = mapped_column(String(128))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

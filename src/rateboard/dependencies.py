"""Dependency wiring helpers."""

import time

from fastapi import FastAPI

from .api.errors import register_error_handlers
from .banner.banner_api import router as banner_router
from .banner.banner_repository import BannerRepository
from .config import AppConfig
from .media.media_api import router as media_router
from .media.media_repository import MediaRepository
from .media.media_service import MediaLibraryService
from .media.upload_validation import UploadValidator
from .promo.promo_api import router as promo_router
from .promo.promo_repository import PromoRepository
from .promo.promo_service import PromoService
from .rates.rates_api import router as rates_router
from .rates.rates_repository import RatesRepository
from .settings.settings_api import router as settings_router
from .settings.settings_repository import SettingsRepository
from .settings.settings_service import SettingsService
from .system.system_api import router as system_router


def include_routers(app: FastAPI, config: AppConfig) -> None:
    """Mount module routers and attach services."""
    policy = config.upload_policy
    media_repo = MediaRepository(config.session_factory)
    promo_repo = PromoRepository(config.session_factory)

    settings_service = SettingsService(repo=SettingsRepository(config.session_factory))

    app.state.config = config
    app.state.started_at = time.monotonic()
    app.state.rates_repo = RatesRepository(config.session_factory)
    app.state.settings_service = settings_service
    app.state.media_repo = media_repo
    app.state.media_service = MediaLibraryService(
        repo=media_repo, validator=UploadValidator(policy.media)
    )
    app.state.promo_repo = promo_repo
    app.state.promo_service = PromoService(
        repo=promo_repo, validator=UploadValidator(policy.promo)
    )
    app.state.banner_repo = BannerRepository(config.session_factory)
    app.state.banner_validator = UploadValidator(policy.banner)

    register_error_handlers(app)
    app.include_router(rates_router)
    app.include_router(settings_router)
    app.include_router(media_router)
    app.include_router(promo_router)
    app.include_router(banner_router)
    app.include_router(system_router)

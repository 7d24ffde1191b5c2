"""Smoke-check imports for the backend and display packages."""

from __future__ import annotations

from importlib import import_module
from types import ModuleType

import pytest

MODULES_AND_SYMBOLS = [
    ("src.rateboard.main", "create_app"),
    ("src.rateboard.config", "AppConfig"),
    ("src.rateboard.dependencies", "include_routers"),
    ("src.rateboard.api", "register_error_handlers"),
    ("src.rateboard.db", "Base"),
    ("src.rateboard.db.db_init", "init_db"),
    ("src.rateboard.rates.rates_api", "router"),
    ("src.rateboard.rates.rates_repository", "RatesRepository"),
    ("src.rateboard.settings.settings_api", "router"),
    ("src.rateboard.settings.settings_service", "SettingsService"),
    ("src.rateboard.media.media_api", "router"),
    ("src.rateboard.media.media_service", "MediaLibraryService"),
    ("src.rateboard.media.upload_validation", "UploadValidator"),
    ("src.rateboard.promo.promo_api", "router"),
    ("src.rateboard.promo.promo_service", "PromoService"),
    ("src.rateboard.banner.banner_api", "router"),
    ("src.rateboard.banner.banner_repository", "BannerRepository"),
    ("src.rateboard.system.system_api", "router"),
    ("src.rateboard.display", "RotationEngine"),
    ("src.rateboard.display.display_client", "DisplayDataClient"),
    ("src.rateboard.display.display_poller", "DisplayPoller"),
    ("src.rateboard.display.display_runner", "run_display"),
    ("src.rateboard.display.display_config", "DisplayConfig"),
]


@pytest.mark.parametrize(("module_name", "symbol"), MODULES_AND_SYMBOLS)
def test_importable_symbols(module_name: str, symbol: str) -> None:
    """Import modules and verify that public symbols are exposed."""

    module: ModuleType = import_module(module_name)
    assert hasattr(module, symbol), f"{module_name} missing {symbol}"

from datetime import datetime, timedelta, timezone

import pytest

from src.rateboard.banner.banner_models import BannerSettings
from src.rateboard.display.display_errors import TransientFetchFailure
from src.rateboard.display.display_models import DisplayStatus, Resource
from src.rateboard.display.rotation import RotationEngine
from src.rateboard.display.scheduler import ManualScheduler
from src.rateboard.media.media_models import MediaItem
from src.rateboard.promo.promo_models import PromoImage
from src.rateboard.rates.rates_models import RateSnapshot
from src.rateboard.settings.settings_models import DEFAULT_DISPLAY_SETTINGS, DisplaySettings

# 04:00 UTC is 09:30 in Asia/Kolkata
BASE_UTC = datetime(2026, 3, 2, 4, 0, 0, tzinfo=timezone.utc)


def make_rates(**overrides: float) -> RateSnapshot:
    values = {
        "id": 1,
        "gold_24k_sale": 74850,
        "gold_24k_purchase": 73200,
        "gold_22k_sale": 68620,
        "gold_22k_purchase": 67100,
        "gold_18k_sale": 56140,
        "gold_18k_purchase": 54900,
        "silver_per_kg_sale": 92500,
        "silver_per_kg_purchase": 90800,
    }
    values.update(overrides)
    return RateSnapshot(**values)


def make_media(media_id: int, duration: int | None = 30, *, active: bool = True) -> MediaItem:
    return MediaItem(
        id=media_id,
        name=f"media-{media_id}.png",
        media_type="image",
        duration_seconds=duration,
        order_index=media_id,
        is_active=active,
    )


def make_promo(promo_id: int, duration: int | None = 5, effect: str = "fade") -> PromoImage:
    return PromoImage(
        id=promo_id,
        name=f"promo-{promo_id}.png",
        duration_seconds=duration,
        transition_effect=effect,
        order_index=promo_id,
    )


def make_settings(**overrides) -> DisplaySettings:
    return DEFAULT_DISPLAY_SETTINGS.merged(overrides)


def build_engine(viewport_width: int = 1280) -> tuple[RotationEngine, ManualScheduler]:
    scheduler = ManualScheduler()
    engine = RotationEngine(
        scheduler,
        viewport_width=viewport_width,
        now=lambda tz: (BASE_UTC + timedelta(seconds=scheduler.now())).astimezone(tz),
    )
    return engine, scheduler


def test_rates_then_media_then_rates_scenario() -> None:
    engine, scheduler = build_engine()
    engine.start()
    engine.apply_settings(make_settings(rates_display_duration_seconds=15))
    engine.apply_rates(make_rates(gold_24k_sale=74850))
    engine.apply_media([make_media(1, duration=30)])

    frame = engine.frame()
    assert frame.status is DisplayStatus.RATES
    assert frame.rates is not None and frame.rates.gold_24k_sale == 74850

    scheduler.advance(14)
    assert engine.showing_rates is True

    scheduler.advance(1)
    frame = engine.frame()
    assert frame.status is DisplayStatus.MEDIA
    assert frame.media is not None and frame.media.id == 1
    assert frame.media_index == 0

    scheduler.advance(29)
    assert engine.showing_rates is False

    scheduler.advance(1)
    assert engine.showing_rates is True
    assert engine.media_index == 0


@pytest.mark.parametrize("count", [1, 2, 3, 5])
def test_media_alternation_cycles_through_list(count: int) -> None:
    engine, scheduler = build_engine()
    engine.apply_settings(make_settings(rates_display_duration_seconds=10))
    engine.apply_rates(make_rates())
    engine.apply_media([make_media(i, duration=i + 1) for i in range(count)])
    engine.start()

    for step in range(count * 2):
        index = step % count
        assert engine.showing_rates is True
        assert engine.media_index == index

        scheduler.advance(10)
        assert engine.showing_rates is False
        assert engine.media_index == index

        scheduler.advance(index + 1)
        assert engine.showing_rates is True
        assert engine.media_index == (index + 1) % count


def test_missing_media_duration_uses_default() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_media([make_media(1, duration=None)])
    engine.start()

    scheduler.advance(15)
    assert engine.showing_rates is False
    scheduler.advance(29)
    assert engine.showing_rates is False
    scheduler.advance(1)
    assert engine.showing_rates is True


def test_promo_slideshow_advances_by_item_duration() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_promos([make_promo(1, 5), make_promo(2, 7), make_promo(3, 3)])
    engine.start()

    assert engine.promo_index == 0
    scheduler.advance(5)
    assert engine.promo_index == 1
    scheduler.advance(6)
    assert engine.promo_index == 1
    scheduler.advance(1)
    assert engine.promo_index == 2
    scheduler.advance(3)
    assert engine.promo_index == 0


@pytest.mark.parametrize("promos", [[], [make_promo(1, 1)]])
def test_single_or_no_promo_never_rotates(promos: list[PromoImage]) -> None:
    engine, scheduler = build_engine()
    engine.apply_settings(make_settings(show_media=False))
    engine.apply_rates(make_rates())
    engine.apply_promos(promos)
    engine.start()

    scheduler.advance(1000)

    assert engine.promo_index == 0
    assert scheduler.pending() == 1  # clock only


def test_show_media_disabled_keeps_rates_on_screen() -> None:
    engine, scheduler = build_engine()
    engine.apply_settings(make_settings(show_media=False))
    engine.apply_rates(make_rates())
    engine.apply_media([make_media(1), make_media(2)])
    engine.start()

    scheduler.advance(1000)

    assert engine.showing_rates is True
    assert engine.frame().status is DisplayStatus.RATES
    assert scheduler.pending() == 1


def test_empty_media_list_keeps_rates_on_screen() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_media([])
    engine.start()

    scheduler.advance(1000)

    assert engine.showing_rates is True
    assert scheduler.pending() == 1


def test_shrinking_media_list_repairs_index_before_render() -> None:
    engine, scheduler = build_engine()
    engine.apply_settings(make_settings(rates_display_duration_seconds=1))
    engine.apply_rates(make_rates())
    items = [make_media(i, duration=1) for i in range(5)]
    engine.apply_media(items)
    engine.start()

    scheduler.advance(8)  # four full rates+media cycles
    scheduler.advance(1)
    assert engine.showing_rates is False
    assert engine.media_index == 4

    engine.apply_media(items[:2])

    assert engine.media_index == 0
    frame = engine.frame()
    assert frame.media is not None and frame.media.id == 0


def test_media_list_emptied_during_media_phase_returns_to_rates() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_media([make_media(1)])
    engine.start()
    scheduler.advance(15)
    assert engine.showing_rates is False

    engine.apply_media([])

    assert engine.showing_rates is True
    assert engine.frame().status is DisplayStatus.RATES
    assert scheduler.pending() == 1


def test_inactive_items_are_ignored() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_media([make_media(1, active=False)])
    engine.start()

    scheduler.advance(100)

    assert engine.showing_rates is True
    assert engine.frame().media is None


def test_awaiting_data_until_rates_arrive() -> None:
    engine, scheduler = build_engine()
    engine.start()
    engine.apply_rates(None)
    engine.apply_media([make_media(1)])
    engine.apply_promos([make_promo(1), make_promo(2)])

    assert engine.frame().status is DisplayStatus.AWAITING_DATA
    assert scheduler.pending() == 1

    scheduler.advance(100)
    assert engine.promo_index == 0
    assert engine.showing_rates is True

    engine.apply_rates(make_rates())

    frame = engine.frame()
    assert frame.status is DisplayStatus.RATES
    assert frame.media_index == 0
    assert frame.promo_index == 0
    assert scheduler.pending() == 3

    scheduler.advance(5)
    assert engine.promo_index == 1


def test_promo_effect_belongs_to_newly_shown_item() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_promos([make_promo(1, 5, "fade"), make_promo(2, 5, "slide-left")])
    engine.start()

    frame = engine.frame()
    assert frame.promo is not None and frame.promo.id == 1
    assert frame.promo_transition is not None and frame.promo_transition.effect == "fade"

    scheduler.advance(5)
    frame = engine.frame()
    assert frame.promo is not None and frame.promo.id == 2
    assert frame.promo_transition is not None and frame.promo_transition.effect == "slide-left"

    scheduler.advance(5)
    frame = engine.frame()
    assert frame.promo is not None and frame.promo.id == 1
    assert frame.promo_transition is not None and frame.promo_transition.effect == "fade"


def test_promo_indicators_mark_current_slide() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_promos([make_promo(1), make_promo(2), make_promo(3)])
    engine.start()
    scheduler.advance(5)

    assert engine.frame().promo_indicators == (False, True, False)

    engine.apply_promos([make_promo(1)])
    assert engine.frame().promo_indicators == ()


def test_dispose_stops_every_timer() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_media([make_media(1, duration=3)])
    engine.apply_promos([make_promo(1), make_promo(2)])
    engine.start()
    scheduler.advance(2)
    before = (engine.showing_rates, engine.media_index, engine.promo_index, engine.clock)

    engine.dispose()
    fired = scheduler.advance(10_000)

    assert fired == 0
    assert (engine.showing_rates, engine.media_index, engine.promo_index, engine.clock) == before
    assert scheduler.pending() == 0

    engine.apply_media([])
    engine.apply_rates(make_rates(id=2))
    engine.start()
    assert scheduler.pending() == 0
    assert engine.frame().rates is not None and engine.frame().rates.id == 1


def test_first_rates_failure_reports_error_until_snapshot_arrives() -> None:
    engine, _ = build_engine()
    engine.start()

    engine.report_fetch_failure(Resource.RATES, TransientFetchFailure(500, "Database operation failed"))

    frame = engine.frame()
    assert frame.status is DisplayStatus.ERROR
    assert frame.error_message == "Database operation failed"

    engine.apply_rates(make_rates())
    frame = engine.frame()
    assert frame.status is DisplayStatus.RATES
    assert frame.error_message is None


def test_absent_rates_after_first_failure_show_awaiting_data() -> None:
    engine, _ = build_engine()
    engine.start()
    engine.report_fetch_failure(Resource.RATES, TransientFetchFailure(500, "Database operation failed"))

    engine.apply_rates(None)

    frame = engine.frame()
    assert frame.status is DisplayStatus.AWAITING_DATA
    assert frame.error_message is None


def test_later_failures_keep_previous_state() -> None:
    engine, _ = build_engine()
    engine.start()
    engine.apply_rates(None)

    engine.report_fetch_failure("rates", TransientFetchFailure(None, "connection refused"))
    assert engine.frame().status is DisplayStatus.AWAITING_DATA

    engine.apply_rates(make_rates(gold_24k_sale=75000))
    engine.report_fetch_failure(Resource.RATES, TransientFetchFailure(503, "unavailable"))
    engine.apply_rates(None)

    frame = engine.frame()
    assert frame.status is DisplayStatus.RATES
    assert frame.rates is not None and frame.rates.gold_24k_sale == 75000


def test_settings_default_then_retained() -> None:
    engine, _ = build_engine()
    engine.apply_settings(None)
    assert engine.frame().background_color == "#FFF8E1"

    engine.apply_settings(make_settings(background_color="#000000"))
    engine.apply_settings(None)
    engine.report_fetch_failure(Resource.SETTINGS, TransientFetchFailure(500, "boom"))

    assert engine.frame().background_color == "#000000"


def test_identical_poll_results_keep_running_timer() -> None:
    engine, scheduler = build_engine()
    settings = make_settings(rates_display_duration_seconds=15)
    media = [make_media(1, duration=30)]
    engine.apply_settings(settings)
    engine.apply_rates(make_rates())
    engine.apply_media(media)
    engine.start()

    scheduler.advance(10)
    engine.apply_settings(settings)
    engine.apply_rates(make_rates())
    engine.apply_media(list(media))
    scheduler.advance(5)

    assert engine.showing_rates is False


def test_duration_change_reschedules_rotation() -> None:
    engine, scheduler = build_engine()
    engine.apply_rates(make_rates())
    engine.apply_media([make_media(1)])
    engine.start()

    scheduler.advance(10)
    engine.apply_settings(make_settings(rates_display_duration_seconds=30))

    scheduler.advance(29)
    assert engine.showing_rates is True
    scheduler.advance(1)
    assert engine.showing_rates is False


def test_clock_ticks_in_named_timezone() -> None:
    engine, scheduler = build_engine()
    engine.start()

    frame = engine.frame()
    assert frame.date_label == "Monday 02-Mar-2026"
    assert frame.time_label == "09:30:00"

    scheduler.advance(1)
    assert engine.frame().time_label == "09:30:01"
    scheduler.advance(59)
    assert engine.frame().time_label == "09:31:00"


def test_banner_height_follows_viewport() -> None:
    engine, _ = build_engine(viewport_width=1280)
    engine.apply_banner(BannerSettings(id=1, banner_image_url="/api/banner/1/file", banner_height=120))

    frame = engine.frame()
    assert frame.banner is not None and frame.banner.height_px == 120

    engine.set_viewport(500)
    frame = engine.frame()
    assert frame.banner is not None and frame.banner.height_px == 72
    assert frame.layout.columns == 1
    assert frame.layout.rate_font_token == "text-xl"

    engine.apply_banner(None)
    assert engine.frame().banner is None


def test_banner_without_image_is_not_rendered() -> None:
    engine, _ = build_engine()
    engine.apply_banner(BannerSettings(id=1, banner_image_url=None))

    assert engine.frame().banner is None

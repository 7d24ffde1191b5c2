from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from src.rateboard.display.display_runner import describe_frame
from src.rateboard.display.rotation import RotationEngine
from src.rateboard.display.scheduler import ManualScheduler
from src.rateboard.promo.promo_models import PromoImage
from src.rateboard.rates.rates_models import RateSnapshot


def fixed_now(tz: ZoneInfo) -> datetime:
    return datetime(2026, 3, 2, 4, 0, tzinfo=timezone.utc).astimezone(tz)


def test_describe_frame_before_data() -> None:
    engine = RotationEngine(ManualScheduler(), now=fixed_now, viewport_width=1920)

    summary = describe_frame(engine.frame())

    assert summary["status"] == "awaiting_data"
    assert summary["gold_24k_sale"] is None
    assert summary["promo"] is None
    assert summary["screen"] == "tv"


def test_describe_frame_with_rates_and_promo() -> None:
    engine = RotationEngine(ManualScheduler(), now=fixed_now, viewport_width=500)
    engine.start()
    engine.apply_rates(
        RateSnapshot(
            id=1,
            gold_24k_sale=74850,
            gold_24k_purchase=73200,
            gold_22k_sale=68620,
            gold_22k_purchase=67100,
            gold_18k_sale=56140,
            gold_18k_purchase=54900,
            silver_per_kg_sale=92500,
            silver_per_kg_purchase=90800,
        )
    )
    engine.apply_promos([PromoImage(id=7, name="diwali.png", transition_effect="zoom-in")])

    summary = describe_frame(engine.frame())

    assert summary["status"] == "rates"
    assert summary["gold_24k_sale"] == 74850
    assert summary["promo"] == "diwali.png"
    assert summary["effect"] == "zoom-in"
    assert summary["screen"] == "mobile"

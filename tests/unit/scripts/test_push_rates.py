import asyncio
import importlib.util
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import httpx
import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[3]
MODULE_PATH = PROJECT_ROOT / "scripts" / "push_rates.py"
SPEC = importlib.util.spec_from_file_location("push_rates_module", MODULE_PATH)
push_rates = importlib.util.module_from_spec(SPEC)
assert SPEC and SPEC.loader
sys.modules["push_rates_module"] = push_rates
SPEC.loader.exec_module(push_rates)

LOCAL = "http://local.test"
WEBHOOK = "http://hooks.test/rates"
PUSHED_AT = datetime(2026, 3, 2, 4, 0, tzinfo=timezone.utc)
SALE = {
    "gold_24k_sale": 74850.0,
    "gold_22k_sale": 68620.0,
    "gold_18k_sale": 56140.0,
    "silver_per_kg_sale": 92500.0,
    "created_date": "2026-03-02T04:00:00",
}


def build_pusher(handler) -> "push_rates.RatePusher":
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return push_rates.RatePusher(
        http=http,
        local_base_url=LOCAL,
        webhook_url=WEBHOOK,
        clock=lambda: PUSHED_AT,
    )


@pytest.mark.asyncio
async def test_push_once_posts_sale_rates_with_source() -> None:
    posted: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            assert str(request.url) == f"{LOCAL}/api/rates/sale"
            return httpx.Response(200, json=SALE)
        posted.append(json.loads(request.content))
        return httpx.Response(200, json={"ok": True})

    pusher = build_pusher(handler)

    assert await pusher.push_once() is True
    assert posted == [{**SALE, "source": "tv-display", "pushed_at": PUSHED_AT.isoformat()}]


@pytest.mark.asyncio
async def test_push_once_skips_when_no_rates() -> None:
    methods: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        methods.append(request.method)
        return httpx.Response(200, content=b"null", headers={"content-type": "application/json"})

    pusher = build_pusher(handler)

    assert await pusher.push_once() is False
    assert methods == ["GET"]


@pytest.mark.asyncio
async def test_webhook_failure_raises_push_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=SALE)
        return httpx.Response(500, text="boom")

    pusher = build_pusher(handler)

    with pytest.raises(push_rates.PushError, match="500"):
        await pusher.push_once()


@pytest.mark.asyncio
async def test_non_json_sale_rates_raise_push_error() -> None:
    pusher = build_pusher(lambda request: httpx.Response(200, text="<html>proxy login</html>"))

    with pytest.raises(push_rates.PushError, match="not JSON"):
        await pusher.push_once()


@pytest.mark.asyncio
async def test_push_loop_keeps_running_after_non_json_response() -> None:
    shutdown_event = asyncio.Event()
    attempts: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request.method)
        shutdown_event.set()
        return httpx.Response(200, text="<html>proxy login</html>")

    pusher = build_pusher(handler)

    await asyncio.wait_for(
        push_rates.run_push_loop(pusher, shutdown_event=shutdown_event, interval_seconds=1),
        timeout=1.0,
    )

    assert attempts == ["GET"]


@pytest.mark.asyncio
async def test_push_loop_survives_failures_until_shutdown() -> None:
    shutdown_event = asyncio.Event()
    attempts: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request.method)
        shutdown_event.set()
        return httpx.Response(503)

    pusher = build_pusher(handler)

    await asyncio.wait_for(
        push_rates.run_push_loop(pusher, shutdown_event=shutdown_event, interval_seconds=1),
        timeout=1.0,
    )

    assert attempts == ["GET"]


def test_main_requires_webhook_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VERCEL_RATES_WEBHOOK_URL", raising=False)

    assert push_rates.main(["--once"]) == 1


def test_parse_args_reads_interval() -> None:
    args = push_rates.parse_args(["--interval", "45"])

    assert args.interval == 45.0
    assert args.once is False

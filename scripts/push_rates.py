"""Push current sale rates to a remote webhook on a fixed interval.

Environment:
    VERCEL_RATES_WEBHOOK_URL  target webhook (required)
    LOCAL_BASE_URL            rateboard backend (default http://127.0.0.1:8000)
    INTERVAL_SECONDS          push interval (default 30)
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

import httpx
import structlog

from src.rateboard.logging import configure_logging

logger = structlog.get_logger(__name__)

DEFAULT_LOCAL_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_INTERVAL_SECONDS = 30.0
PUSH_SOURCE = "tv-display"


class PushError(RuntimeError):
    """Raised when loading sale rates or posting to the webhook fails."""


@dataclass(slots=True)
class RatePusher:
    http: httpx.AsyncClient
    local_base_url: str
    webhook_url: str
    clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)

    async def load_sale_rates(self) -> dict[str, Any] | None:
        response = await self.http.get(f"{self.local_base_url.rstrip('/')}/api/rates/sale")
        if response.is_error:
            raise PushError(f"Failed to load sale rates: {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise PushError(f"Sale rates response is not JSON: {exc}") from exc

    async def push_once(self) -> bool:
        """Push one snapshot; return ``False`` when there is nothing to push."""
        sale = await self.load_sale_rates()
        if not sale:
            logger.warning("push_rates.no_rates")
            return False
        payload = {**sale, "source": PUSH_SOURCE, "pushed_at": self.clock().isoformat()}
        response = await self.http.post(self.webhook_url, json=payload)
        if response.is_error:
            raise PushError(f"Webhook failed: {response.status_code} {response.text}".strip())
        logger.info("push_rates.pushed", webhook_url=self.webhook_url)
        return True


async def run_push_loop(
    pusher: RatePusher,
    *,
    shutdown_event: asyncio.Event,
    interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
) -> None:
    interval = max(1.0, float(interval_seconds))
    while not shutdown_event.is_set():
        try:
            await pusher.push_once()
        except (PushError, httpx.HTTPError) as exc:
            logger.error("push_rates.failed", error=str(exc))
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=interval)
        except asyncio.TimeoutError:
            continue


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Push current sale rates to a webhook.")
    parser.add_argument("--once", action="store_true", help="Push a single snapshot and exit.")
    parser.add_argument(
        "--interval",
        type=float,
        default=float(os.getenv("INTERVAL_SECONDS", DEFAULT_INTERVAL_SECONDS)),
        help="Seconds between pushes.",
    )
    return parser.parse_args(argv)


async def _main(args: argparse.Namespace, webhook_url: str) -> int:
    async with httpx.AsyncClient(timeout=15.0) as http:
        pusher = RatePusher(
            http=http,
            local_base_url=os.getenv("LOCAL_BASE_URL", DEFAULT_LOCAL_BASE_URL),
            webhook_url=webhook_url,
        )
        if args.once:
            try:
                await pusher.push_once()
            except (PushError, httpx.HTTPError) as exc:
                print(f"push failed: {exc}", file=sys.stderr)
                return 2
            return 0
        logger.info(
            "push_rates.started",
            interval_seconds=args.interval,
            local_base_url=pusher.local_base_url,
            webhook_url=webhook_url,
        )
        await run_push_loop(pusher, shutdown_event=asyncio.Event(), interval_seconds=args.interval)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    webhook_url = os.getenv("VERCEL_RATES_WEBHOOK_URL")
    if not webhook_url:
        print("VERCEL_RATES_WEBHOOK_URL is not set.", file=sys.stderr)
        return 1
    configure_logging()
    try:
        return asyncio.run(_main(args, webhook_url))
    except KeyboardInterrupt:  # pragma: no cover - interactive stop
        return 0


if __name__ == "__main__":
    sys.exit(main())

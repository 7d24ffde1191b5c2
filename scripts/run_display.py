"""Run a headless display instance that polls the backend and logs frames."""

from __future__ import annotations

import argparse
import asyncio
import signal
import sys

from src.rateboard.display.display_config import DisplayConfig
from src.rateboard.display.display_runner import run_display
from src.rateboard.logging import configure_logging


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the rateboard display rotation headlessly.")
    parser.add_argument("--api-base-url", help="Backend base URL (overrides RATEBOARD_DISPLAY_API_BASE_URL).")
    parser.add_argument("--viewport-width", type=int, help="Viewport width used for layout derivation.")
    parser.add_argument("--timezone", help="Named timezone for the clock.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DisplayConfig:
    overrides = {
        "api_base_url": args.api_base_url,
        "viewport_width": args.viewport_width,
        "timezone": args.timezone,
    }
    return DisplayConfig(**{key: value for key, value in overrides.items() if value is not None})


async def _run(config: DisplayConfig) -> None:
    shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_event.set)
        except NotImplementedError:  # pragma: no cover - platform without signal support
            pass
    await run_display(config, shutdown_event)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging()
    try:
        asyncio.run(_run(build_config(args)))
    except KeyboardInterrupt:  # pragma: no cover - interactive stop
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())

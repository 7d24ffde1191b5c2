"""Headless display: rotation engine, scheduler, data facade and poller."""

from .display_client import DisplayDataClient
from .display_errors import TransientFetchFailure
from .display_models import DisplayFrame, DisplayStatus, FetchResult, Resource
from .display_poller import DisplayPoller, run_display_polling
from .layout import DisplayLayout, ScreenSize, TransitionSpec, derive_layout, transition_for
from .rotation import RotationEngine
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler

__all__ = [
    "AsyncioScheduler",
    "DisplayDataClient",
    "DisplayFrame",
    "DisplayLayout",
    "DisplayPoller",
    "DisplayStatus",
    "FetchResult",
    "ManualScheduler",
    "Resource",
    "RotationEngine",
    "Scheduler",
    "ScreenSize",
    "TransientFetchFailure",
    "TransitionSpec",
    "derive_layout",
    "run_display_polling",
    "transition_for",
]

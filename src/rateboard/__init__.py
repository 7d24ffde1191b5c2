"""Rateboard: jewelry-shop TV signage backend and display engine.

The backend persists rates, display settings and promotional media; the
``display`` package contains the headless rotation engine that decides what a
TV screen shows at any moment.
"""

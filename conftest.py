"""Shared test configuration: fixed display and logging settings."""

import os

os.environ.setdefault("CURRENCY_FORMAT", "inr")
os.environ.setdefault("LOG_FORMAT", "text")

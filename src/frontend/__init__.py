"""HTTP presentation layer for completion records (Flask)."""
from __future__ import annotations
from .web import app, attach_engine

__all__ = ["app", "attach_engine"]

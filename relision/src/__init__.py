"""Relision string escaping — public API."""

from __future__ import annotations

from .util import BorderError as BorderError, escape as escape, quote as quote

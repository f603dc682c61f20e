"""Shared pytest markers describing which operating systems a test targets."""

from __future__ import annotations

import pytest

OS_AGNOSTIC = pytest.mark.os_agnostic

__all__ = ["OS_AGNOSTIC"]

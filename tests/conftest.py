"""
Pytest fixtures: portal clients with mocked transports.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from tenderwatch.core.backends import HttpBackend
from tenderwatch.core.portals import EpmsPortal


@pytest.fixture
def make_portal() -> Callable[[Callable[[httpx.Request], httpx.Response]], EpmsPortal]:
    """Build a portal client whose HTTP traffic goes to a handler."""
    def factory(handler: Callable[[httpx.Request], httpx.Response], max_retries: int = 3) -> EpmsPortal:
        backend = HttpBackend(
            max_retries=max_retries,
            retry_wait_min=0,
            retry_wait_max=0,
            transport=httpx.MockTransport(handler),
        )
        return EpmsPortal(backend=backend)

    return factory

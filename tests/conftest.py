"""Root conftest: shared test configuration and the adapter fixture.

Invariants:
    - Settings cache cleared around every test (env changes take effect)
    - `adapter` is parametrized over every registered backend, so contract
      tests run once per implementation
"""

import os

import pytest

from resource_adapters.config import Settings, get_settings
from resource_adapters.infrastructure.adapter_factory import ADAPTER_BACKENDS, create_adapter

# Ensure a shell export doesn't pick the backend for us
os.environ.pop("RESOURCE_ADAPTERS_ADAPTER_BACKEND", None)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(params=sorted(ADAPTER_BACKENDS))
def adapter(request):
    """A fresh, empty adapter for each registered backend."""
    return create_adapter(Settings(adapter_backend=request.param))

"""Adapter Factory: pick the storage backend named in settings.

Invariants:
    - Every registered backend satisfies core.adapter_protocols.Adapter
    - Unknown backend names fail loudly at construction, never fall back
"""

import logging
from typing import Callable

from resource_adapters.config import Settings, get_settings
from resource_adapters.core.adapter_protocols import Adapter
from resource_adapters.infrastructure.memory_adapter import MemoryAdapter

logger = logging.getLogger(__name__)


ADAPTER_BACKENDS: dict[str, Callable[[], Adapter]] = {
    MemoryAdapter.name: MemoryAdapter,
}


def create_adapter(settings: Settings | None = None) -> Adapter:
    """Instantiate the adapter for settings.adapter_backend."""
    if settings is None:
        settings = get_settings()
    backend = settings.adapter_backend
    factory = ADAPTER_BACKENDS.get(backend)
    if factory is None:
        known = ", ".join(sorted(ADAPTER_BACKENDS))
        raise ValueError(f"Unknown adapter backend '{backend}' (known: {known})")
    logger.info("Adapter backend selected", extra={"adapter": backend})
    return factory()

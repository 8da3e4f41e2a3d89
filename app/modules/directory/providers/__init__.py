"""Provider registry for directory adapters.

Adapters register under a short name with ``@register_provider`` and are
discovered by importing every submodule of this package. The active adapter
is chosen by ``settings.directory.provider``.

Example:
    @register_provider("google")
    class GoogleWorkspaceDirectory(DirectoryAdapter):
        ...

    client = build_directory_client(settings)
"""

import importlib
import pkgutil
from typing import TYPE_CHECKING, Dict, Type

import structlog

from modules.directory.providers.base import DirectoryAdapter, DirectoryClient

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

_discovered: Dict[str, Type[DirectoryAdapter]] = {}


def register_provider(name: str):
    """Register a directory adapter class under name.

    Args:
        name: Unique identifier for this provider (matches DIRECTORY_PROVIDER)

    Returns:
        Decorator function

    Raises:
        TypeError: If applied to something other than a DirectoryAdapter subclass
        RuntimeError: If name is already registered to another class
    """

    def decorator(obj):
        if not isinstance(obj, type) or not issubclass(obj, DirectoryAdapter):
            raise TypeError(
                f"Directory provider must subclass DirectoryAdapter: {name}, got {obj}"
            )

        existing = _discovered.get(name)
        if existing is not None and existing is not obj:
            raise RuntimeError(f"Directory provider already registered: {name}")

        _discovered[name] = obj
        logger.debug("directory_provider_registered", provider=name, class_name=obj.__name__)
        return obj

    return decorator


def discover_providers() -> Dict[str, Type[DirectoryAdapter]]:
    """Import every adapter module in this package and return the registry."""
    for module_info in pkgutil.iter_modules(__path__):
        modname = module_info.name
        if modname.startswith("_") or modname == "base":
            continue
        importlib.import_module(f"{__name__}.{modname}")
    return dict(_discovered)


def get_provider_class(name: str) -> Type[DirectoryAdapter]:
    """Return the adapter class registered under name.

    Raises:
        KeyError: If no adapter is registered under name
    """
    if name not in _discovered:
        discover_providers()
    try:
        return _discovered[name]
    except KeyError:
        raise KeyError(f"Unknown directory provider: {name}") from None


def build_directory_client(settings: "Settings") -> DirectoryClient:
    """Instantiate the adapter selected by settings.directory.provider."""
    provider_name = settings.directory.provider
    provider_cls = get_provider_class(provider_name)
    logger.info("directory_provider_selected", provider=provider_name)
    return provider_cls.from_settings(settings)


__all__ = [
    "DirectoryAdapter",
    "DirectoryClient",
    "build_directory_client",
    "discover_providers",
    "get_provider_class",
    "register_provider",
]

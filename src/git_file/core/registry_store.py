"""Registry persistence interface and implementations.

RegistryStore hides where the registry lives so that entry management can be
tested in memory. RealRegistryStore reads and writes the INI file at the
repository root; FakeRegistryStore keeps serialized registries in a dict.
"""

import configparser
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from git_file.core.errors import RegistryWriteError
from git_file.core.registry import Registry, parse_registry, serialize_registry

logger = logging.getLogger(__name__)


class RegistryStore(ABC):
    """Abstract interface for loading and saving the tracking registry."""

    @abstractmethod
    def load(self, path: Path) -> Registry:
        """Load the registry stored at path.

        Returns an empty Registry when nothing is stored there or the stored
        content cannot be parsed. Absence is not an error at this layer.
        """
        ...

    @abstractmethod
    def save(self, registry: Registry, path: Path) -> None:
        """Overwrite the registry stored at path.

        Raises:
            RegistryWriteError: If the registry cannot be written
        """
        ...


# ============================================================================
# Production Implementation
# ============================================================================


class RealRegistryStore(RegistryStore):
    """File-backed implementation using configparser."""

    def load(self, path: Path) -> Registry:
        if not path.exists():
            logger.debug("No registry at %s, starting empty", path)
            return Registry()

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read registry %s, treating it as empty: %s", path, e)
            return Registry()

        try:
            registry = parse_registry(content)
        except configparser.Error as e:
            logger.warning("Could not parse registry %s, treating it as empty: %s", path, e)
            return Registry()

        logger.debug("Loaded %d entries from %s", len(registry), path)
        return registry

    def save(self, registry: Registry, path: Path) -> None:
        try:
            path.write_text(serialize_registry(registry), encoding="utf-8")
        except OSError as e:
            raise RegistryWriteError(f"Failed to write to configuration file '{path}': {e}") from e
        logger.debug("Saved %d entries to %s", len(registry), path)


# ============================================================================
# Fake Implementation
# ============================================================================


class FakeRegistryStore(RegistryStore):
    """In-memory fake implementation - no filesystem access.

    Registries are stored in serialized form so that callers can never share
    mutable state with the store, just as with the real file.
    """

    def __init__(
        self,
        *,
        registries: dict[Path, Registry] | None = None,
        fail_saves: bool = False,
    ) -> None:
        """Create fake with optional pre-configured registries.

        Args:
            registries: Initial registries keyed by registry path
            fail_saves: If True, every save() raises RegistryWriteError
        """
        self._contents = {
            path: serialize_registry(registry) for path, registry in (registries or {}).items()
        }
        self._fail_saves = fail_saves
        self._save_calls: list[Path] = []

    @property
    def save_calls(self) -> list[Path]:
        """Paths passed to save(), in call order. For test assertions only."""
        return self._save_calls

    def stored(self, path: Path) -> Registry | None:
        """Registry last saved at path, or None if nothing is stored."""
        if path not in self._contents:
            return None
        return parse_registry(self._contents[path])

    def load(self, path: Path) -> Registry:
        if path not in self._contents:
            return Registry()
        return parse_registry(self._contents[path])

    def save(self, registry: Registry, path: Path) -> None:
        self._save_calls.append(path)
        if self._fail_saves:
            raise RegistryWriteError(f"Failed to write to configuration file '{path}'")
        self._contents[path] = serialize_registry(registry)

"""
Local JSON storage for the application state

The whole snapshot is read once at startup and rewritten in full after every
change. Last write wins.
"""

import json
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from meatshop.infrastructure.logging.logger_config import get_structured_logger
from meatshop.infrastructure.persistence.app_state import AppState
from meatshop.infrastructure.utilities.exceptions import PersistenceError

logger = get_structured_logger(__name__)

SNAPSHOT_KEYS = ("settings", "products", "orders")

_state_adapter = TypeAdapter(AppState)


class JsonStateStore:
    """Reads and writes the {settings, products, orders} snapshot"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> AppState:
        """
        Load the snapshot, falling back to defaults.

        Sections present in the file replace the defaults. Absent or null
        sections keep them. A file that does not parse or match the schema
        is logged and the full defaults are used.
        """
        if not self.path.exists():
            logger.info("No stored snapshot, starting from defaults", path=str(self.path))
            return AppState()

        try:
            raw = self.path.read_text(encoding="utf-8")
            return self.decode(raw)
        except (OSError, ValueError, SchemaError) as e:
            logger.error(
                "Persistence load error, using defaults", path=str(self.path), error=str(e)
            )
            return AppState()

    @staticmethod
    def decode(raw: str) -> AppState:
        """Parse a serialized snapshot; raises on malformed input"""
        data: Any = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Snapshot must be a JSON object")
        present = {key: data[key] for key in SNAPSHOT_KEYS if data.get(key) is not None}
        return _state_adapter.validate_python(present)

    @staticmethod
    def encode(state: AppState) -> str:
        return _state_adapter.dump_json(state, indent=2).decode("utf-8")

    def save(self, state: AppState) -> None:
        """Write the entire snapshot, replacing the file in one step"""
        payload = self.encode(state)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            finally:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
        except OSError as e:
            logger.error("Persistence save error", path=str(self.path), error=str(e))
            raise PersistenceError(f"Could not write {self.path}: {e}") from e

        logger.debug(
            "Snapshot saved",
            path=str(self.path),
            products=len(state.products),
            orders=len(state.orders),
        )


@contextmanager
def managed_snapshot(
    store: JsonStateStore, state: AppState
) -> Generator[AppState, None, None]:
    """
    Context manager for state mutations.

    Persists the snapshot when the block completes. Nothing is written if the
    block raises, but in-memory changes already made are not rolled back.
    """
    yield state
    store.save(state)

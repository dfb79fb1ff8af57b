"""JSON File Store: the whole fund collection as one pretty-printed JSON array.

Invariants:
    - load() never raises: unreadable, missing or malformed files read as [],
      and array entries that are not JSON objects are dropped
    - save() rewrites the whole file; any failure surfaces as PersistenceError
    - Writes go to a temp file in the same directory, then os.replace()
      (readers never observe a half-written file)
    - File IO runs in a worker thread so the event loop is not blocked

Design Decisions:
    - Singleton store initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - No locking: concurrent writers race and the last full rewrite wins
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from fund_catalog.core.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileFundStore:
    """FundRepository backed by a single JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    async def load(self) -> list[dict]:
        return await asyncio.to_thread(self._read)

    async def save(self, funds: list[dict]) -> None:
        await asyncio.to_thread(self._write, funds)

    async def health_check(self) -> bool:
        """Data file exists and holds a JSON array (for readiness probes)."""
        return await asyncio.to_thread(self._is_readable)

    def _read(self) -> list[dict]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(
                f"Error reading funds data: {e}",
                extra={"data_file": str(self.path), "operation": "read"},
            )
            return []
        if not isinstance(data, list):
            logger.error(
                "Funds data is not a JSON array",
                extra={"data_file": str(self.path), "operation": "read"},
            )
            return []
        funds = [item for item in data if isinstance(item, dict)]
        if len(funds) != len(data):
            logger.error(
                f"Skipped {len(data) - len(funds)} non-object entries in funds data",
                extra={"data_file": str(self.path), "operation": "read"},
            )
        return funds

    def _write(self, funds: list[dict]) -> None:
        try:
            payload = json.dumps(funds, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.error(
                f"Error writing funds data: {e}",
                extra={"data_file": str(self.path), "operation": "write"},
            )
            raise PersistenceError("could not write data file", "save")
        logger.debug(
            "Funds data written",
            extra={"data_file": str(self.path), "count": len(funds)},
        )

    def _is_readable(self) -> bool:
        try:
            return isinstance(
                json.loads(self.path.read_text(encoding="utf-8")), list,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Data file health check failed: {e}")
            return False


# Singleton (initialized on startup)
fund_store: JsonFileFundStore | None = None


def init_store(path: Path | str) -> JsonFileFundStore:
    global fund_store
    fund_store = JsonFileFundStore(path)
    return fund_store


def get_fund_store() -> JsonFileFundStore:
    """FastAPI dependency for the fund repository."""
    if not fund_store:
        raise RuntimeError("Fund store not initialized")
    return fund_store

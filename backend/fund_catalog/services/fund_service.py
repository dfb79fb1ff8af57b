"""Fund Service: load, apply pure core logic, save.

Invariants:
    - Every call reads the whole collection fresh from the repository
    - Mutations write the whole collection back; reads never write
    - Names arrive still percent-encoded and are decoded here (400 on bad encoding)
    - Missing funds raise ResourceNotFoundError (404)

Design Decisions:
    - Repository injected, never imported: tests pass an in-memory fake
    - No read-modify-write lock: two concurrent updates race and the later
      save wins (lost-update hazard accepted for a single-admin catalog)
"""

import logging
from collections.abc import Mapping, Sequence

from fund_catalog.core.errors import ErrorContext, ResourceNotFoundError
from fund_catalog.core.fund_meta import compute_filter_meta
from fund_catalog.core.fund_name import decode_fund_name, find_fund_index
from fund_catalog.core.fund_patch import apply_fund_patch
from fund_catalog.core.fund_query import parse_fund_query, run_fund_query
from fund_catalog.core.repository_protocols import FundRepository

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Fund deleted successfully"


class FundService:
    """Use cases behind the /api/funds routes."""

    def __init__(self, repository: FundRepository):
        self._repository = repository

    async def list_funds(self, params: Mapping[str, Sequence[str]]) -> dict:
        funds = await self._repository.load()
        page = run_fund_query(funds, parse_fund_query(params))
        return page.to_response()

    async def get_filter_meta(self) -> dict:
        return compute_filter_meta(await self._repository.load())

    async def get_fund(self, raw_name: str) -> dict:
        name = decode_fund_name(raw_name)
        funds = await self._repository.load()
        return funds[self._index_or_404(funds, name)]

    async def update_fund(self, raw_name: str, patch: Mapping) -> dict:
        """Shallow-merge patch into the named fund and persist the collection."""
        name = decode_fund_name(raw_name)
        funds = await self._repository.load()
        index = self._index_or_404(funds, name)
        funds[index] = apply_fund_patch(funds[index], patch)
        await self._repository.save(funds)
        logger.info(
            f"Fund updated: {sorted(patch)}",
            extra={"fund_name": name, "operation": "update"},
        )
        return funds[index]

    async def delete_fund(self, raw_name: str) -> dict:
        name = decode_fund_name(raw_name)
        funds = await self._repository.load()
        removed = funds.pop(self._index_or_404(funds, name))
        await self._repository.save(funds)
        logger.info(
            "Fund deleted",
            extra={"fund_name": name, "operation": "delete"},
        )
        return {"message": DELETED_MESSAGE, "fund": removed}

    @staticmethod
    def _index_or_404(funds: list[dict], name: str) -> int:
        index = find_fund_index(funds, name)
        if index is None:
            raise ResourceNotFoundError(
                "Fund", name, ErrorContext(fund_name=name),
            )
        return index

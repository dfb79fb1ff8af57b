"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Fund persistence accessed only through FundRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so a test fake needs no base class
    - Async in Protocol: implementations do IO; the pure core that consumes
      the loaded collection is never async itself
    - Whole-collection load/save: the persisted state is one JSON array
"""

from typing import Protocol


class FundRepository(Protocol):
    """Contract for fund collection persistence: implemented by shell."""
    async def load(self) -> list[dict]: ...
    async def save(self, funds: list[dict]) -> None: ...

"""Fund Routes: list, filter metadata, and by-name read/update/delete.

Invariants:
    - /meta is registered before /{name} so it is never read as a fund name
    - Names are taken from the raw (still percent-encoded) request path and
      decoded by the service, so malformed encodings reach the 400 path
    - Names may contain '/' when it is sent encoded as %2F
    - List query parameters are passed through unparsed (the core is lenient)
    - Fund records are returned exactly as stored; the schemas only document
      the canonical shape in OpenAPI (responses=...), they never validate output

Design Decisions:
    - FundService built per request from the injected repository
      (tests override get_fund_store with an in-memory fake)
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Request

from fund_catalog.infrastructure.json_store import get_fund_store
from fund_catalog.schemas.fund import (
    FilterMeta, Fund, FundDeleted, FundListResponse, FundPatch,
)
from fund_catalog.services.fund_service import FundService

PREFIX = "/api/funds"
router = APIRouter(prefix=PREFIX, tags=["funds"])


def get_fund_service(store=Depends(get_fund_store)) -> FundService:
    return FundService(store)


def raw_name_segment(request: Request, decoded_name: str) -> str:
    """Percent-encoded name exactly as the client sent it."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return quote(decoded_name, safe="")
    path = raw_path.decode("latin-1").split("?", 1)[0]
    marker = PREFIX + "/"
    start = path.find(marker)
    if start < 0:
        return quote(decoded_name, safe="")
    return path[start + len(marker):]


@router.get("", responses={200: {"model": FundListResponse}})
async def list_funds(
    request: Request, service: FundService = Depends(get_fund_service),
):
    """Filtered, sorted, paginated fund list."""
    params = {
        key: request.query_params.getlist(key)
        for key in request.query_params.keys()
    }
    return await service.list_funds(params)


@router.get("/meta", response_model=FilterMeta)
async def get_filter_meta(service: FundService = Depends(get_fund_service)):
    """Distinct strategies, geographies, currencies and managers."""
    return await service.get_filter_meta()


@router.get("/{name:path}", responses={200: {"model": Fund}})
async def get_fund(
    name: str, request: Request,
    service: FundService = Depends(get_fund_service),
):
    """Single fund by exact name."""
    return await service.get_fund(raw_name_segment(request, name))


@router.put("/{name:path}", responses={200: {"model": Fund}})
async def update_fund(
    name: str, body: FundPatch, request: Request,
    service: FundService = Depends(get_fund_service),
):
    """Shallow-merge the submitted fields into the named fund."""
    return await service.update_fund(
        raw_name_segment(request, name), body.to_patch(),
    )


@router.delete("/{name:path}", responses={200: {"model": FundDeleted}})
async def delete_fund(
    name: str, request: Request,
    service: FundService = Depends(get_fund_service),
):
    """Remove the named fund and return it."""
    return await service.delete_fund(raw_name_segment(request, name))

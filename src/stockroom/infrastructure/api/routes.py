"""FastAPI endpoints for the inventory catalog.

Endpoints are plain ``def`` functions, so FastAPI runs them on a worker
thread pool.  Every handler call is made while holding the app's store
lock; the in-memory repository itself is not thread-safe.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Request

from stockroom.application.create_items import CreateItemsHandler
from stockroom.application.delete_item import DeleteItemHandler
from stockroom.application.dto import ItemDTO, ItemSpec, QuantityIncrease
from stockroom.application.get_item import GetItemHandler
from stockroom.application.increase_quantities import IncreaseQuantitiesHandler
from stockroom.application.list_inventory import ListInventoryHandler
from stockroom.application.update_item_info import UpdateItemInfoHandler
from stockroom.application.upsert_item import UpsertItemHandler
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.infrastructure.api.schemas import (
    ErrorResponse,
    ItemRequest,
    ItemResponse,
    QuantityIncreaseRequest,
    UpdateItemInfoRequest,
)

router = APIRouter(
    prefix="/inventory",
    tags=["inventory"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@contextmanager
def _store(request: Request) -> Iterator[ItemRepository]:
    with request.app.state.store_lock:
        yield request.app.state.item_repo


def _to_response(dto: ItemDTO) -> ItemResponse:
    return ItemResponse(
        code=dto.code,
        name=dto.name,
        attributes=dto.attributes,
        price=float(dto.price),
        quantity=dto.quantity,
    )


def _to_spec(body: ItemRequest) -> ItemSpec:
    return ItemSpec(
        code=body.code,
        name=body.name,
        price=body.price,
        quantity=body.quantity,
        attributes=frozenset(a.value for a in body.attributes),
    )


@router.get("", response_model=list[ItemResponse])
def list_inventory(request: Request) -> list[ItemResponse]:
    with _store(request) as repo:
        items = ListInventoryHandler(repo).handle()
    return [_to_response(dto) for dto in items]


@router.get("/{search_value}", response_model=ItemResponse)
def get_item(search_value: str, request: Request) -> ItemResponse:
    """Look an item up by product code or, failing the code format, by name."""
    with _store(request) as repo:
        dto = GetItemHandler(repo).handle(search_value)
    return _to_response(dto)


@router.post("/addItem", response_model=list[ItemResponse])
def add_item(body: ItemRequest, request: Request) -> list[ItemResponse]:
    with _store(request) as repo:
        items = CreateItemsHandler(repo).handle([_to_spec(body)])
    return [_to_response(dto) for dto in items]


@router.post("/addItems", response_model=list[ItemResponse])
def add_items(body: list[ItemRequest], request: Request) -> list[ItemResponse]:
    with _store(request) as repo:
        items = CreateItemsHandler(repo).handle([_to_spec(b) for b in body])
    return [_to_response(dto) for dto in items]


@router.post("/upsertItem", response_model=list[ItemResponse])
def upsert_item(body: ItemRequest, request: Request) -> list[ItemResponse]:
    with _store(request) as repo:
        items = UpsertItemHandler(repo).handle(_to_spec(body))
    return [_to_response(dto) for dto in items]


@router.post("/increaseQuantities", response_model=list[ItemResponse])
def increase_quantities(
    body: list[QuantityIncreaseRequest], request: Request
) -> list[ItemResponse]:
    increases = [QuantityIncrease(code=b.code, delta=b.delta) for b in body]
    with _store(request) as repo:
        items = IncreaseQuantitiesHandler(repo).handle(increases)
    return [_to_response(dto) for dto in items]


@router.put("/{code}", response_model=list[ItemResponse])
def update_item_info(
    code: str, body: UpdateItemInfoRequest, request: Request
) -> list[ItemResponse]:
    with _store(request) as repo:
        items = UpdateItemInfoHandler(repo).handle(
            code,
            attributes=frozenset(a.value for a in body.attributes),
            price=body.price,
        )
    return [_to_response(dto) for dto in items]


@router.delete("/{code}", response_model=list[ItemResponse])
def delete_item(code: str, request: Request) -> list[ItemResponse]:
    with _store(request) as repo:
        items = DeleteItemHandler(repo).handle(code)
    return [_to_response(dto) for dto in items]

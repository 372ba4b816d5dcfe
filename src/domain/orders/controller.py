from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from dependency_injector.wiring import inject, Provide

from src.domain.orders.errors import InvalidOrder
from src.domain.orders.module import OrdersModule
from src.domain.orders.order_service import OrderService


router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", summary="Submit a new order", status_code=201)
@inject
async def create_order(
    request: Request,
    service: OrderService = Depends(Provide[OrdersModule.order_service]),
) -> JSONResponse:
    # body parsing belongs here, field validation belongs to the service
    try:
        payload = await request.json()
    except ValueError as e:
        raise InvalidOrder("Invalid JSON body") from e

    order, location = await service.create_order(payload)
    return JSONResponse(
        status_code=201,
        content=order.to_response(),
        headers={"Location": location},
    )


@router.get("", summary="List orders, newest first")
@inject
async def list_orders(
    limit: Optional[str] = Query(default=None),
    service: OrderService = Depends(Provide[OrdersModule.order_service]),
) -> JSONResponse:
    orders = await service.list_orders(limit)
    return JSONResponse(content=[o.to_response() for o in orders])


@router.get("/{order_id}", summary="Get a single order")
@inject
async def get_order(
    order_id: str,
    service: OrderService = Depends(Provide[OrdersModule.order_service]),
) -> JSONResponse:
    order = await service.get_order(order_id)
    return JSONResponse(content=order.to_response())


@router.delete("/{order_id}", summary="Cancel (delete) an order")
@inject
async def cancel_order(
    order_id: str,
    service: OrderService = Depends(Provide[OrdersModule.order_service]),
) -> JSONResponse:
    result = await service.cancel_order(order_id)
    return JSONResponse(content=result)

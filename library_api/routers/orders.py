"""
Orders Router

Endpoints:
- POST /order  - place an order for a user and a list of books
- GET  /orders - list every order with its user and books resolved

Order endpoints are open: any client may place an order for any user id.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status

from library_api.config import get_settings
from library_api.dependencies import Orders
from library_api.schemas import (
    EnrichedOrderResponse,
    MessageResponse,
    OrderCreate,
    OrderPlacedResponse,
)
from library_api.services.orders import BooksNotFoundError, UserNotFoundError
from library_api.services.rate_limiter import limiter

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    tags=["Orders"],
    responses={
        500: {"model": MessageResponse, "description": "Internal server error"},
    },
)


@router.post(
    "/order",
    response_model=OrderPlacedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place a new order",
    description="Order a list of books for a user. The total is the sum of the books' current prices.",
    responses={
        400: {"model": MessageResponse, "description": "Books not found"},
        404: {"model": MessageResponse, "description": "User not found"},
    },
)
@limiter.limit(settings.rate_limit_write)
def place_order(
    request: Request,
    order_data: OrderCreate,
    orders: Orders,
) -> OrderPlacedResponse:
    """
    Place an order.

    The user is checked first, so an unknown user is reported even when
    the book list is also invalid.
    """
    try:
        order = orders.place_order(order_data.user, order_data.books)
    except UserNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )
    except BooksNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return OrderPlacedResponse(message="Order placed successfully", order=order)


@router.get(
    "/orders",
    response_model=list[EnrichedOrderResponse],
    summary="Get all orders with user and book details",
    description="Returns every order with `user` and `books` replaced by the full records.",
)
@limiter.limit(settings.rate_limit_default)
def list_orders(request: Request, orders: Orders) -> list[EnrichedOrderResponse]:
    """List all orders, enriched. No filtering or pagination."""
    return orders.list_orders_enriched()

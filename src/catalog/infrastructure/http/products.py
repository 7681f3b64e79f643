"""REST resource for the product catalog, mounted at ``/api/products``."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from catalog.application.dto import CreateProductCommand, UpdateProductCommand
from catalog.application.product_management import ProductManagementService
from catalog.domain.model.value_objects import ProductId
from catalog.infrastructure.http.responses import DecimalJSONResponse
from catalog.infrastructure.http.schemas import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)

router = APIRouter(prefix="/api/products", tags=["products"])


def _respond(
    payload: ProductResponse | List[ProductResponse], status_code: int = status.HTTP_200_OK
) -> DecimalJSONResponse:
    # python-mode dump keeps prices as Decimal for the renderer
    if isinstance(payload, list):
        content = [item.model_dump() for item in payload]
    else:
        content = payload.model_dump()
    return DecimalJSONResponse(content=content, status_code=status_code)


def get_service(request: Request) -> ProductManagementService:
    """The service instance the application was built with.

    Tests can replace it through ``app.dependency_overrides``.
    """
    return request.app.state.product_service


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
def create_product(
    payload: CreateProductRequest,
    service: ProductManagementService = Depends(get_service),
) -> DecimalJSONResponse:
    dto = service.create_product(
        CreateProductCommand(name=payload.name, price=payload.price)
    )
    return _respond(ProductResponse.from_dto(dto), status.HTTP_201_CREATED)


@router.get("", response_model=List[ProductResponse], summary="List products")
def list_products(
    service: ProductManagementService = Depends(get_service),
) -> DecimalJSONResponse:
    return _respond([ProductResponse.from_dto(dto) for dto in service.find_all_products()])


@router.get("/{product_id}", response_model=ProductResponse, summary="Get a product")
def get_product(
    product_id: str,
    service: ProductManagementService = Depends(get_service),
) -> DecimalJSONResponse:
    return _respond(
        ProductResponse.from_dto(service.find_product(ProductId.of(product_id)))
    )


@router.put("/{product_id}", response_model=ProductResponse, summary="Update a product")
def update_product(
    product_id: str,
    payload: UpdateProductRequest,
    service: ProductManagementService = Depends(get_service),
) -> DecimalJSONResponse:
    dto = service.update_product(
        ProductId.of(product_id),
        UpdateProductCommand(name=payload.name, price=payload.price),
    )
    return _respond(ProductResponse.from_dto(dto))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a product",
)
def delete_product(
    product_id: str,
    service: ProductManagementService = Depends(get_service),
) -> Response:
    service.delete_product(ProductId.of(product_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{product_id}/activate",
    response_model=ProductResponse,
    summary="Activate a product",
)
def activate_product(
    product_id: str,
    service: ProductManagementService = Depends(get_service),
) -> DecimalJSONResponse:
    return _respond(
        ProductResponse.from_dto(service.activate_product(ProductId.of(product_id)))
    )


@router.patch(
    "/{product_id}/deactivate",
    response_model=ProductResponse,
    summary="Deactivate a product",
)
def deactivate_product(
    product_id: str,
    service: ProductManagementService = Depends(get_service),
) -> DecimalJSONResponse:
    return _respond(
        ProductResponse.from_dto(service.deactivate_product(ProductId.of(product_id)))
    )

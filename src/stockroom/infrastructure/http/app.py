"""HTTP API (FastAPI) over the application handlers.

``create_app`` receives the repositories it serves; the caller owns their
lifetime. Domain errors become ``{"error": message}`` bodies with 400/404.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockroom.application.add_product import AddProductHandler
from stockroom.application.add_variant import AddVariantHandler
from stockroom.application.create_order import CreateOrderHandler
from stockroom.application.delete_order import DeleteOrderHandler
from stockroom.application.delete_product import DeleteProductHandler
from stockroom.application.delete_variant import DeleteVariantHandler
from stockroom.application.dto import OrderItemSpec
from stockroom.application.show_order import ShowOrderHandler
from stockroom.application.show_product import ShowProductHandler
from stockroom.application.show_stats import (
    ShowInventoryStatsHandler,
    ShowSalesStatsHandler,
)
from stockroom.application.update_order_status import UpdateOrderStatusHandler
from stockroom.application.update_product import UpdateProductHandler
from stockroom.application.update_variant import UpdateVariantHandler
from stockroom.domain.exceptions import (
    DomainException,
    NotFoundError,
    ValidationError,
)
from stockroom.domain.model.product import ProductPatch, VariantPatch
from stockroom.domain.repository.order_repository import OrderRepository
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.infrastructure.http.schemas import (
    InventoryStatsOut,
    OrderIn,
    OrderOut,
    OrderStatusIn,
    ProductIn,
    ProductOut,
    SalesStatsOut,
    VariantIn,
    VariantOut,
    VariantUpdateIn,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    ValidationError: 400,
    NotFoundError: 404,
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    product_repo: ProductRepository,
    order_repo: OrderRepository,
    ping_message: str = "ping",
) -> FastAPI:
    app = FastAPI(title="Stockroom API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error mapping ----------------------------------------------------------

    @app.exception_handler(DomainException)
    def handle_domain_error(request: Request, exc: DomainException) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(type(exc), 500)
        if status_code == 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _error(status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    def handle_bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid {field}: {first.get('msg')}" if field else "Invalid request body"
        return _error(400, message)

    @app.exception_handler(StarletteHTTPException)
    def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    # --- Health -----------------------------------------------------------------

    @app.get("/api/ping")
    def ping():
        return {"message": ping_message}

    # --- Products ---------------------------------------------------------------

    @app.get("/api/products", response_model=list[ProductOut])
    def list_products():
        with product_repo.lock:
            products = product_repo.list_all()
        return [ProductOut.from_domain(p) for p in products]

    @app.post("/api/products", response_model=ProductOut, status_code=201)
    def create_product(body: ProductIn):
        if not body.name or not body.brand or not body.category:
            raise ValidationError("Missing required fields")
        product = AddProductHandler(product_repo).handle(
            name=body.name, brand=body.brand, category=body.category
        )
        return ProductOut.from_domain(product)

    @app.get("/api/products/{product_id}", response_model=ProductOut)
    def get_product(product_id: str):
        return ProductOut.from_domain(ShowProductHandler(product_repo).handle(product_id))

    @app.put("/api/products/{product_id}", response_model=ProductOut)
    def update_product(product_id: str, body: ProductIn):
        patch = ProductPatch(name=body.name, brand=body.brand, category=body.category)
        product = UpdateProductHandler(product_repo).handle(product_id, patch)
        return ProductOut.from_domain(product)

    @app.delete("/api/products/{product_id}", status_code=204)
    def delete_product(product_id: str):
        DeleteProductHandler(product_repo).handle(product_id)
        return Response(status_code=204)

    # --- Variants ---------------------------------------------------------------

    @app.post("/api/products/{product_id}/variants", response_model=VariantOut, status_code=201)
    def add_variant(product_id: str, body: VariantIn):
        variant = AddVariantHandler(product_repo).handle(
            product_id,
            size=body.size,
            color=body.color,
            price=body.price,
            stock=body.stock,
        )
        return VariantOut.from_domain(variant)

    @app.put("/api/products/{product_id}/variants/{variant_id}", response_model=VariantOut)
    def update_variant(product_id: str, variant_id: str, body: VariantUpdateIn):
        if body.stock is None:
            raise ValidationError("Stock quantity is required")
        patch = VariantPatch(price=body.price, stock=body.stock)
        variant = UpdateVariantHandler(product_repo).handle(product_id, variant_id, patch)
        return VariantOut.from_domain(variant)

    @app.delete("/api/products/{product_id}/variants/{variant_id}", status_code=204)
    def delete_variant(product_id: str, variant_id: str):
        DeleteVariantHandler(product_repo).handle(product_id, variant_id)
        return Response(status_code=204)

    # --- Orders -----------------------------------------------------------------

    @app.get("/api/orders", response_model=list[OrderOut])
    def list_orders():
        with order_repo.lock:
            orders = order_repo.list_all()
        return [OrderOut.from_domain(o) for o in orders]

    @app.post("/api/orders", response_model=OrderOut, status_code=201)
    def create_order(body: OrderIn):
        specs = [
            OrderItemSpec(
                variant_id=i.variant_id,
                product_id=i.product_id,
                product_name=i.product_name,
                size=i.size,
                color=i.color,
                quantity=i.quantity,
                price=i.price,
            )
            for i in body.items
        ]
        order = CreateOrderHandler(order_repo).handle(specs, customer_name=body.customer_name)
        return OrderOut.from_domain(order)

    @app.get("/api/orders/{order_id}", response_model=OrderOut)
    def get_order(order_id: str):
        return OrderOut.from_domain(ShowOrderHandler(order_repo).handle(order_id))

    @app.put("/api/orders/{order_id}/status", response_model=OrderOut)
    def update_order_status(order_id: str, body: OrderStatusIn):
        order = UpdateOrderStatusHandler(order_repo).handle(order_id, body.status)
        return OrderOut.from_domain(order)

    @app.delete("/api/orders/{order_id}", status_code=204)
    def delete_order(order_id: str):
        DeleteOrderHandler(order_repo).handle(order_id)
        return Response(status_code=204)

    # --- Statistics -------------------------------------------------------------

    @app.get("/api/stats", response_model=InventoryStatsOut)
    def inventory_stats():
        return InventoryStatsOut.from_domain(ShowInventoryStatsHandler(product_repo).handle())

    @app.get("/api/stats/sales", response_model=SalesStatsOut)
    def sales_stats():
        return SalesStatsOut.from_domain(ShowSalesStatsHandler(order_repo).handle())

    return app

"""Marketplace FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the ``marketplace`` domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Logging and domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       -> payments are instant and always succeed
#   - "production" -> PostgreSQL, MessageDB event store and event_processing =
#                     "async" (handlers fire in the Engine, see server.py)
from marketplace.utils.logging import bind_request_context, clear_request_context, configure_logging

configure_logging()

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from protean.integrations.fastapi import register_exception_handlers  # noqa: E402

from marketplace.domain import marketplace  # noqa: E402

marketplace.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Marketplace API",
    description="Storefront, seller dashboard, payments and charity donations",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the marketplace domain context and bind request details for logging."""
    bind_request_context(method=request.method, path=request.url.path)
    try:
        with marketplace.domain_context():
            return await call_next(request)
    finally:
        clear_request_context()


register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from marketplace.catalogue.api import category_router, product_router, stats_router  # noqa: E402
from marketplace.charity.api import charity_router, donation_router, goods_router  # noqa: E402
from marketplace.identity.api import auth_router, seller_router  # noqa: E402
from marketplace.ordering.api import cart_router, checkout_router, order_router, return_router  # noqa: E402
from marketplace.payments.api import router as payment_router  # noqa: E402
from marketplace.promotions.api import router as discount_router  # noqa: E402

for router in (
    product_router,
    category_router,
    stats_router,
    auth_router,
    seller_router,
    cart_router,
    checkout_router,
    order_router,
    return_router,
    discount_router,
    payment_router,
    charity_router,
    donation_router,
    goods_router,
):
    app.include_router(router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": marketplace.name})

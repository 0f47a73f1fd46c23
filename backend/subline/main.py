from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from subline.core.config import settings
from subline.routers import line_items, subscriptions

OPENAPI_TAGS = [
    {
        "name": "Line Items",
        "description": "Manage subscription line items and preview their future order lines.",
    },
    {"name": "Subscriptions", "description": "Query the event trail of subscriptions."},
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.version,
    description="Subscription line items: what each recurring order will contain.",
    openapi_tags=OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)

app.include_router(line_items.router, prefix="/v1/line_items", tags=["Line Items"])
app.include_router(subscriptions.router, prefix="/v1/subscriptions", tags=["Subscriptions"])


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": settings.APP_NAME,
        "version": settings.version,
        "domain": settings.APP_DOMAIN,
        "status": "running",
    }

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from artisan_hub.core.config import get_settings
from artisan_hub.core.errors import register_exception_handlers
from artisan_hub.core.lifespan import lifespan
from artisan_hub.api.v1.routers.health import router as health_router
from artisan_hub.api.v1.routers.products import router as products_router
from artisan_hub.api.v1.routers.artisans import router as artisans_router
from artisan_hub.api.v1.routers.orders import router as orders_router
from artisan_hub.api.v1.routers.dashboard import router as dashboard_router
from artisan_hub.api.v1.routers.images import router as images_router
from artisan_hub.api.v1.routers.marketing import router as marketing_router
from artisan_hub.api.v1.routers.social import router as social_router
from artisan_hub.api.v1.routers.ai import router as ai_router
from artisan_hub.api.v1.routers.users import router as users_router
from artisan_hub.core.logging import configure_logging

import logging

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV, e.g. "https://artisanhub.in,https://www.artisanhub.in"
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],                            # X-User-Id comes from the gateway
    max_age=86400,
)

register_exception_handlers(app)

# ------- Uploaded images -------
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")

# ------- Routes -------
app.include_router(health_router)
app.include_router(products_router)          # catalog
app.include_router(artisans_router)          # catalog + onboarding
app.include_router(orders_router)            # catalog
app.include_router(dashboard_router)         # seller dashboard
app.include_router(images_router)            # uploads
app.include_router(marketing_router)         # listing copy, marketing package
app.include_router(social_router)            # posts, share links
app.include_router(ai_router)                # content, translate, speech, vision, analytics
app.include_router(users_router)             # account


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "version": settings.GIT_SHA or None,
        "endpoints": {
            "health": "/health",
            "products": "/api/products",
            "artisans": "/api/artisans",
            "orders": "/api/orders",
            "dashboard": "/api/dashboard",
            "images": "/api/images/upload",
            "marketing": "/api/marketing/description",
            "social": "/api/social/generate",
            "ai": "/api/ai/content",
            "users": "/api/users/me",
        },
    }


def run():
    import uvicorn
    uvicorn.run("artisan_hub.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.is_development)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import configurator, orders, pdf

logger = logging.getLogger("configurator")

app = FastAPI(
    title=settings.APP_NAME,
    description="Window / door / balcony configurator: scaled preview and itemized price estimate",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(configurator.router, prefix="/api")
app.include_router(pdf.router, prefix="/api")
app.include_router(orders.router, prefix="/api")

logger.info("Canvas %dx%d px", settings.CANVAS_MAX_WIDTH_PX, settings.CANVAS_MAX_HEIGHT_PX)


@app.get("/health")
def health():
    return {"status": "ok", "app": "window-configurator"}

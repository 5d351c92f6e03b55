"""
FastAPI application entry point.
"""

from fastapi import FastAPI
import logging
from stock_display.core.config import settings
from stock_display.core.cache import cache
from stock_display.core.wiring import build_container
from stock_display.data.catalog import InventoryCatalog
from stock_display.dependencies import set_container
from stock_display.routers import stock

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Stock Display Service",
    version="1.0.0",
    docs_url="/docs"
)


@app.on_event("startup")
async def startup_event():
    """Load the catalog, compile the service container and connect the cache."""
    catalog = await InventoryCatalog(settings.catalog_path).load()
    set_container(build_container(catalog))

    if settings.cache_enabled:
        await cache.connect()
    else:
        logger.info("Stock summary cache disabled")


@app.on_event("shutdown")
async def shutdown_event():
    await cache.disconnect()
    set_container(None)


app.include_router(stock.router)


@app.get("/")
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "service": "Stock Display Service",
        "version": "1.0.0",
        "endpoints": {
            "get_stock": "/products/{sku}/stock",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "stock-display-service"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "stock_display.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )

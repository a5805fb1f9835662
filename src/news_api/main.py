"""FastAPI application entry point."""

from fastapi import FastAPI

from common.cli_helpers import setup_logging
from news_api.config import get_config
from news_api.routers import news

setup_logging()

app = FastAPI(
    title="Prism News API",
    description="REST API for recently ingested news records",
    version="1.0.0",
)

app.include_router(news.router)


@app.get("/")
async def root():
    """API root - returns basic info."""
    return {
        "name": "Prism News API",
        "version": "1.0.0",
        "docs": "/docs",
    }


def main():
    """Run the API server."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "news_api.main:app",
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()

"""Main FastAPI application"""
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.router import api_router
from catalog.core.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
log = logging.getLogger(__name__)

app = FastAPI(title="Item Catalog API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "HEAD", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    log.info(
        "%s %s -> %d (%.1f ms)",
        request.method, request.url.path, response.status_code, elapsed_ms,
    )
    return response


# Health check
@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "catalog"}


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn
    log.info("http server started on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)

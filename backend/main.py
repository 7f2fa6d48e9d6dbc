from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import os
import time
import logging

from routes import attendance, certificates, config, export, grades, performance

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Academy Grading API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("ACADEMY_CORS_ORIGINS", "http://localhost:9002").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    t0 = time.perf_counter()
    logger.info("REQUEST  %s %s", request.method, request.url.path)
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - t0) * 1000
    logger.info("RESPONSE %s %s - status: %d, time: %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response

app.include_router(config.router, prefix="/api")
app.include_router(grades.router, prefix="/api")
app.include_router(export.router, prefix="/api")
app.include_router(attendance.router, prefix="/api")
app.include_router(performance.router, prefix="/api")
app.include_router(certificates.router, prefix="/api")


@app.get("/")
def root():
    return {"status": "ok", "message": "Academy Grading API"}

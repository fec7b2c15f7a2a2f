from __future__ import annotations

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .ranking import WordFrequencyRanker


logger = logging.getLogger(__name__)

GZIP_LEVEL = max(1, min(9, int(os.getenv("WORDRANK_GZIP_LEVEL", "5"))))
GZIP_MIN_SIZE = max(0, int(os.getenv("WORDRANK_GZIP_MIN_SIZE", "500")))
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("WORDRANK_ALLOWED_ORIGINS", "*").split(",") if origin.strip()
]
ACCESS_LOG = os.getenv("WORDRANK_ACCESS_LOG", "1").lower() not in {"0", "false", "no"}

ranker = WordFrequencyRanker()

app = FastAPI(title="wordrank", version="1.0.0")

app.add_middleware(GZipMiddleware, minimum_size=GZIP_MIN_SIZE, compresslevel=GZIP_LEVEL)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _human_latency(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


@app.middleware("http")
async def access_log(request: Request, call_next):  # type: ignore[no-untyped-def]
    if not ACCESS_LOG:
        return await call_next(request)

    started = time.perf_counter()
    status = 500
    bytes_out = "0"
    try:
        response = await call_next(request)
        status = response.status_code
        bytes_out = response.headers.get("content-length", "0")
        return response
    finally:
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"
        logger.info(
            "method=%s, uri=%s, status=%s latency=%s in:%s out:%s",
            request.method,
            uri,
            status,
            _human_latency(time.perf_counter() - started),
            request.headers.get("content-length", "0"),
            bytes_out,
        )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
        msg = str(err.get("msg", "invalid value"))
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": _describe_validation_errors(exc)})


class TopTenWordsRequest(BaseModel):
    text: str = Field(min_length=1)


class WordTotal(BaseModel):
    word: str
    total: int


class TopTenWordsResponse(BaseModel):
    success: bool = True
    data: list[WordTotal]
    total: int


@app.post("/top-ten-words", response_model=TopTenWordsResponse)
def top_ten_words(req: TopTenWordsRequest) -> dict[str, object]:
    entries, total = ranker.rank(req.text)
    return {
        "success": True,
        "data": [entry.to_dict() for entry in entries],
        "total": total,
    }

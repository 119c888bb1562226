# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.



import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from companion.routers import chat_router, info_router
from companion.utils import config
from companion.utils.logging_setup import configure_logging
from companion.utils.rate_limit_utils import limiter

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🌱 Existential Crisis Companion server running")
    logger.info("🔍 Problem detection active, 📚 mental health info available")
    yield
    logger.info("👋 Companion server shutting down")


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Existential Crisis Companion API",
    description="Keyword-based supportive chat and mental health resources",
    version="1.0",
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# Browser client is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router.router)
app.include_router(info_router.router)


# ---------------------- ADDING EXCEPTION HANDLER ----------------------
@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request, exc):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please slow down."}
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to the Existential Crisis Companion backend"}


@app.get("/health", tags=["Infra"])
def health_check():
    return {"status": "ok"}


def run():
    uvicorn.run("companion.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()

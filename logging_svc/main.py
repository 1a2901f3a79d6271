#!/usr/bin/env python3
"""
Logging Service

Accepts log records over HTTP and publishes them to the ``logProducer-out-0``
binding; the ``logConsumer`` function receives records from
``logConsumer-in-0`` and writes them to a diagnostic sink.

Usage:
    python -m logging_svc.main

Then:
- POST /logs/send?level=INFO&message=hello - Publish a log record
- POST /bindings/{destination}             - Broker push ingress
- GET  /health                              - Health check
"""

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from logging_svc import __version__
from logging_svc.api import bindings_router, health_router, logs_router
from logging_svc.config import settings
from logging_svc.domain.entities.log_message import LogMessage
from logging_svc.domain.services.log_consumer import LOG_CONSUMER_NAME, build_log_consumer
from logging_svc.infrastructure.binder.binder_factory import BinderFactory
from logging_svc.messaging.function_bindings import FunctionBindingRegistry
from logging_svc.middleware import ErrorHandlingMiddleware, LoggingMiddleware

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(consumer: Optional[Callable[[LogMessage], None]] = None) -> FastAPI:
    """
    Build the application.

    Args:
        consumer: Callback bound as ``logConsumer``; defaults to the sink
            selected by ``CONSUMER_SINK``
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        binder = BinderFactory.get_binder()
        functions = FunctionBindingRegistry(binder, settings.bindings)
        functions.register_consumer(
            LOG_CONSUMER_NAME,
            consumer or build_log_consumer(settings.CONSUMER_SINK),
            LogMessage,
        )
        await binder.start()
        app.state.functions = functions
        logger.info(f"🚀 {settings.APP_NAME} started with {binder.binder_type} binder")
        try:
            yield
        finally:
            await binder.close()
            BinderFactory.reset()
            logger.info(f"👋 {settings.APP_NAME} stopped")

    app = FastAPI(
        title="Logging Service",
        description="Publishes log records to a message binding and consumes them back",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Order matters - last added is first executed
    app.add_middleware(LoggingMiddleware, enable_detailed_logging=settings.LOG_LEVEL.upper() == "DEBUG")
    app.add_middleware(ErrorHandlingMiddleware, enable_error_logging=True)

    app.include_router(health_router)
    app.include_router(logs_router)
    app.include_router(bindings_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    print(f"🚀 Starting {settings.APP_NAME}...")
    print(f"📡 Binder: {BinderFactory.get_binder_type()}")
    print(f"📤 logProducer-out-0 -> {settings.LOG_PRODUCER_DESTINATION}")
    print(f"📥 logConsumer-in-0  -> {settings.LOG_CONSUMER_DESTINATION}")
    print(f"🌐 Server: http://localhost:{settings.PORT}")

    uvicorn.run(
        "logging_svc.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )

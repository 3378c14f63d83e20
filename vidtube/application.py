from fastapi import FastAPI
from vidtube.lifespan import lifespan
from vidtube.middleware.cors import add_cors
from vidtube.middleware.error import add_exception_handlers
from vidtube.middleware.request_log import add_request_logging
from vidtube.api.router import add_router
from vidtube.utility.logger import configure_logging

configure_logging()

application = FastAPI(
    title="VidTube API",
    description="Video sharing platform backend API documentation",
    version="1.0.0",
    lifespan=lifespan
)

add_cors(application)
add_request_logging(application)
add_exception_handlers(application)
add_router(application)

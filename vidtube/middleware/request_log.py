import time
import uuid
from fastapi import Request
from vidtube.utility.logger import get_logger

logger = get_logger("http")

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_SECONDS = 1.0


def add_request_logging(application):
    @application.middleware("http")
    async def log_request(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "%s %s %s %.1fms [%s]",
            request.method, request.url.path, response.status_code, elapsed * 1000, request_id,
        )
        if elapsed > SLOW_REQUEST_SECONDS:
            logger.warning("Slow request %s %s took %.2fs [%s]", request.method, request.url.path, elapsed, request_id)
        return response

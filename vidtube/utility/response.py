from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(status_code: int, message: str, data=None, error=None, meta: dict | None = None) -> dict:
    body = {
        "success": 200 <= status_code < 300,
        "statusCode": status_code,
        "message": message,
        "data": data,
        "error": error,
    }
    if meta is not None:
        body["meta"] = meta
    return body


def api_response(message: str, data=None, status_code: int = status.HTTP_200_OK, meta: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope(status_code, message, data, meta=meta)),
    )


def paginated_response(message: str, page, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Wrap a `Page` from utility.pagination: docs go to `data`, counters to `meta.pagination`."""
    return api_response(message, page.docs, status_code, meta={"pagination": page.meta()})

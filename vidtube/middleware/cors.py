from fastapi.middleware.cors import CORSMiddleware
from vidtube.config.environments import ALLOWED_ORIGINS


def add_cors(application):
    application.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        # browsers refuse credentials with a wildcard origin
        allow_credentials="*" not in ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

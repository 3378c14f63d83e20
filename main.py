import uvicorn
from vidtube.application import application
from vidtube.config.environments import PORT, LOG_LEVEL

if __name__ == "__main__":
    uvicorn.run(
        application,
        host="0.0.0.0",
        port=PORT,
        log_level=LOG_LEVEL.lower(),
        reload=False
    )

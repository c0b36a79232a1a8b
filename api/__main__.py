import uvicorn

from api.settings import settings


if __name__ == "__main__":
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, reload=settings.reload, log_level="info")

import uvicorn

from app.core.config import settings


def main() -> None:
    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, reload=settings.debug)


if __name__ == "__main__":
    main()

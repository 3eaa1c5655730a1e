import uvicorn

from mediaforge.gateway import create_app
from mediaforge.gateway.config import Settings

if __name__ == "__main__":
    settings = Settings()  # type: ignore
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)

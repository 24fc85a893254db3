"""
Application FastAPI — monte le router email_blocks.

Lancement : uvicorn email_blocks.app:app
"""
import logging

from fastapi import FastAPI

from .core import config
from .router import router

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s — %(message)s",
)

app = FastAPI(title="Email Blocks", version="0.1.0")
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

import config
from database import init_db
from errors import register_error_handlers
from routers import portone_router, payments_router, magazines_router

# Logging
logging.basicConfig(
     level=config.LOG_LEVEL,
     format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# App instance
app = FastAPI(title="IT Magazine Subscription API")

# CORS
app.add_middleware(
     CORSMiddleware,
     allow_origins=config.CORS_ORIGINS,
     allow_credentials=True,
     allow_methods=["*"],
     allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(portone_router)
app.include_router(payments_router)
app.include_router(magazines_router)


@app.get("/health")
def health():
     return {"status": "ok"}


if __name__ == "__main__":
     init_db()
     logger.info("Starting server on port %s", config.PORT)
     uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)

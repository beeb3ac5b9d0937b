# main.py
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI

from loyalty.core.config import settings
from loyalty.core.logging_config import configure_logging

from loyalty.api.loyalty import router as loyalty_router
from loyalty.api.middleware import RemoteUserMiddleware
from loyalty.services.loyalty import build_dispatcher

configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

app = FastAPI(title="Portfolio Loyalty Level")

# -------------------------
# Notification channel
# -------------------------
# One dispatcher (and connection provider) per process; the queue handle
# is looked up lazily on the first tier change.
app.state.dispatcher = build_dispatcher(settings)

app.add_middleware(RemoteUserMiddleware, header=settings.REMOTE_USER_HEADER)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(loyalty_router)

from fastapi import FastAPI
import logging

from famealy.api.deps import get_context, reset_context
from famealy.events.web_observers import start as start_event_observers, stop as stop_event_observers

# Routers
from famealy.api.routes import auth, dashboard, family, meals

# Logging
logger = logging.getLogger("famealy_app")

# Initialize FastAPI app
app = FastAPI(title="famealy – Family Status & Meal Ratings API")

# Include routers
app.include_router(auth.router)
app.include_router(family.router)
app.include_router(dashboard.router)
app.include_router(meals.router)


@app.on_event("startup")
def _startup():
    """Register activity observers, then run the start sequence (daily reset, session)."""
    start_event_observers()
    ctx = get_context()
    logger.info("famealy ready (screen: %s)", ctx.session.screen.value)


@app.on_event("shutdown")
def _shutdown():
    """Stop dashboard polling and detach from the identity provider."""
    reset_context()
    stop_event_observers()


@app.get("/health")
def health():
    return {"status": "ok"}

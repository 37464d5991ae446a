import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from event_booking.core.config import CORS_ORIGINS
from event_booking.core.exception_handlers import register_exception_handlers
from event_booking.core.logger_config import configure_logging
from event_booking.database.db import Base, engine
from event_booking.models import bookings, events, users  # noqa: F401  register tables
from event_booking.routes import auth, profile
from event_booking.routes import bookings as booking_routes
from event_booking.routes import events as event_routes

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create all tables (no migrations)
    Base.metadata.create_all(bind=engine)
    logger.info("Event booking API starting up")
    yield
    logger.info("Event booking API shutting down")


app = FastAPI(title="Event Booking API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include the routers
app.include_router(auth.router)
app.include_router(event_routes.router)
app.include_router(profile.router)
app.include_router(booking_routes.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("event_booking.main:app", host="0.0.0.0", port=int(os.getenv("PORT", 5000)))

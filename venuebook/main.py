from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from venuebook.core.config import CORS_ORIGINS
from venuebook.db.session import engine, SessionLocal
from venuebook.db.base import Base
from venuebook.db import models  # noqa: F401 (ensures models are registered)
from venuebook.api.router import api_router
from venuebook.db.seed import seed_admin


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


#Create application instance
app = FastAPI(title="Venuebook API")


#configure CORS for local development and production frontend domains
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


#Create all database tables on application startup
Base.metadata.create_all(bind=engine)


#Seed initial admin account when the application starts
@app.on_event("startup")
def startup():
    db = SessionLocal()
    try:
        seed_admin(db)
    finally:
        db.close()


#Register all API routes under the main application
app.include_router(api_router)

# ========================================
# app/main.py
# ========================================

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.database import connect_to_mongo, close_mongo_connection
from app.utils.errors import HRError

# ===========================
# IMPORT ALL ROUTERS
# ===========================

from app.routes.applicants import router as applicants_router
from app.routes.users import router as users_router
from app.routes.employees import router as employees_router
from app.routes.offer_letters import router as offer_letters_router
from app.routes.uploads import router as uploads_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# ===========================
# CREATE FASTAPI APP
# ===========================

app = FastAPI(
    title="APPHOX MetaTrack360 API",
    description="HR backend for applicants, users, employees and offer letters",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# ===========================
# CORS MIDDLEWARE
# ===========================
raw_origins = os.getenv("ALLOWED_ORIGINS", "")
origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===========================
# DATABASE EVENTS
# ===========================

@app.on_event("startup")
async def start_db():
    """Connect to MongoDB on startup"""
    await connect_to_mongo()

@app.on_event("shutdown")
async def stop_db():
    """Close MongoDB connection on shutdown"""
    await close_mongo_connection()

# ===========================
# ERROR HANDLERS
# ===========================

@app.exception_handler(HRError)
async def hr_error_handler(request: Request, exc: HRError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Request failed. Please try again later."})

# ===========================
# REGISTER ROUTERS
# ===========================

app.include_router(applicants_router, tags=["Applicants"])
app.include_router(users_router, tags=["Users"])
app.include_router(employees_router, tags=["Employees"])
app.include_router(offer_letters_router, tags=["Offer Letters"])
app.include_router(uploads_router, tags=["Uploads"])

# ===========================
# ROOT ENDPOINTS
# ===========================

@app.get("/")
async def root():
    """API root endpoint"""
    return {
        "status": "APPHOX MetaTrack360 API is running...",
        "version": API_VERSION,
        "documentation": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": API_VERSION
    }

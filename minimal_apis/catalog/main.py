# minimal_apis/catalog/main.py

"""
FastAPI Catalog Service API.
Manages product categories and products, and issues JWT tokens through
`POST /login`. Listing categories requires one of those tokens.
"""
import logging

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from ..common import config as server_config
from ..common.db import init_tables
from ..common.errors import register_exception_handlers
from ..common.logging_config import setup_logging
from . import config
from .auth import CredentialChecker, TokenService, get_credential_checker, get_token_service
from .db import Base, engine
from .routers import categories, products
from .schemas import TokenResponse, UserLogin

# -----------------------------
# Configure Logging
# -----------------------------
setup_logging()
logger = logging.getLogger(__name__)

if config.JWT_KEY_FROM_ENV:
    logger.info("Catalog Service: JWT signing key loaded from the environment.")
else:
    logger.info("Catalog Service: JWT_KEY **NOT SET**, using the development key.")


# -----------------------------
# FastAPI App Initialization
# -----------------------------
app = FastAPI(
    title="Catalog Service API",
    description="Manages categories and products of the product catalog",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=server_config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# --- FastAPI Event Handlers ---
@app.on_event("startup")
async def startup_event():
    """
    Ensures the catalog tables exist, retrying while the database is unreachable.
    """
    init_tables(Base, engine, "Catalog Service")


# --- Root Endpoint ---
@app.get("/", response_class=PlainTextResponse, summary="Root endpoint")
async def read_root():
    return "Catálogo de Produtos - 2024"


# --- Health Check Endpoint ---
@app.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
async def health_check():
    """
    A simple health check endpoint to verify the service is running.
    """
    return {"status": "ok", "service": "catalog-service"}


# --- Login Endpoint ---
@app.post(
    "/login",
    response_model=TokenResponse,
    tags=["Autenticacao"],
    summary="Exchange a username and password for a JWT",
    responses={400: {"description": "Invalid login"}},
)
def login(
    user: UserLogin,
    checker: CredentialChecker = Depends(get_credential_checker),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Issues a signed token for a valid username/password pair.
    A wrong pair answers 400 Bad Request, not 401.
    """
    if not checker.check(user.username, user.password):
        logger.warning(f"Invalid login attempt for user '{user.username}'.")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid login")
    token = token_service.issue_token(user.username)
    logger.info(f"Issued token for user '{user.username}'.")
    return {"token": token}


# -----------------------------
# CRUD Endpoints
# -----------------------------
app.include_router(categories.router)
app.include_router(products.router)


def run():
    uvicorn.run(app, host=server_config.APP_HOST, port=server_config.APP_PORT)


if __name__ == "__main__":
    run()

from fastapi import FastAPI, Request
from api.beds import router as beds_router
from api.patients import router as patients_router
from api.healthcheck import router as healthcheck_router
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from exceptions.custom_errors import CUSTOM_ERRORS, WardOperationError, status_code_for
from utils.logger import logger
import os

load_dotenv()
# env
CORS_ALLOW_ORIGINS = [o for o in os.getenv("CORS_ALLOW_ORIGINS", "").split(",") if o]
ALLOWED_HOSTS = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h] or ["*"]
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", "0"))  # 0 = no limit

# app
app = FastAPI(title="Ward Bed Assignment API")

# middlewares
if os.getenv("ENABLE_CORS") == "true":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# allowed hosts
app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS)


# basic request size guard (blocks large JSON bodies early)
@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    if MAX_BODY_BYTES > 0:
        cl = request.headers.get("content-length")
        if cl and cl.isdigit() and int(cl) > MAX_BODY_BYTES:
            return JSONResponse(
                status_code=413, content={"detail": "Payload too large"}
            )
    return await call_next(request)


# ward errors -> HTTP status from CUSTOM_ERRORS
async def ward_error_handler(request: Request, exc: Exception):
    status = status_code_for(exc, default=400 if isinstance(exc, WardOperationError) else 500)
    logger.info("%s %s -> %d %s", request.method, request.url.path, status, type(exc).__name__)
    return JSONResponse(
        status_code=status,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


for error_class in CUSTOM_ERRORS:
    app.add_exception_handler(error_class, ward_error_handler)


# Register routers
app.include_router(beds_router, prefix="/api")
app.include_router(patients_router, prefix="/api")
app.include_router(healthcheck_router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Ward Bed Assignment API is running. Visit /docs for the Swagger UI."}

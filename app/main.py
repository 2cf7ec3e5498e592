from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging
import traceback
from contextlib import asynccontextmanager

from config.app import Settings, settings
from adapters.external.reference_data_client import load_reference_data
from core.errors import DiscountError
from core.rules.discount_rules import DiscountEngine
from routers import discount

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _stack(exc: Exception, app_settings: Settings) -> Optional[str]:
    """Formatted traceback, hidden in production"""
    if app_settings.is_production:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the discount API for the given settings"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load reference data once; any problem aborts startup"""
        logger.info("🚀 Initializing Trade-in Discount Service...")
        try:
            reference_data = load_reference_data(
                zip_path=app_settings.ZIP_DATA_PATH,
                device_path=app_settings.DEVICE_DATA_PATH,
            )
        except Exception as e:
            logger.error(f"❌ Failed to load reference data: {e}")
            raise

        app.state.reference_data = reference_data
        app.state.discount_engine = DiscountEngine(reference_data)
        logger.info("✅ Discount engine ready")

        yield

        logger.info("🔄 Shutting down Trade-in Discount Service...")

    app = FastAPI(
        title="Trade-in Discount Service API",
        description="Personalized trade-in discounts from location, age bracket and device value",
        version="1.0.0",
        debug=app_settings.DEBUG,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(discount.router)

    @app.exception_handler(DiscountError)
    async def discount_error_handler(request: Request, exc: DiscountError):
        logger.warning(f"{exc.kind} on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "stack": _stack(exc, app_settings)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request body", "stack": _stack(exc, app_settings)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail), "stack": None},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}")
        message = "Internal Server Error" if app_settings.is_production else (str(exc) or "Internal Server Error")
        return JSONResponse(
            status_code=500,
            content={"message": message, "stack": _stack(exc, app_settings)},
        )

    @app.get("/health")
    async def health_check(request: Request):
        """Simple health check endpoint"""
        reference_data = getattr(request.app.state, "reference_data", None)
        return {
            "status": "healthy" if reference_data is not None else "starting",
            "system": "Trade-in Discount Service",
            "version": "1.0.0",
            "reference_data": {
                "zip_codes": len(reference_data.zip_power) if reference_data else 0,
                "device_types": len(reference_data.devices) if reference_data else 0
            }
        }

    return app


# Create FastAPI app
app = create_app()

# Development mode check
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)

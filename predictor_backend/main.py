import logging
import time
from typing import Optional

from fastapi import APIRouter, FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, load_settings
from .errors import BadRequest, RelayError
from .fields import extract_fields
from .models import ExtractionResult, MeasurementRecord, PredictionResult
from .ocr import TesseractExtractor, TextExtractor
from .predictor import HttpPredictor, Predictor
from .storage import scratch_upload

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "POST, GET, OPTIONS"
ALLOWED_HEADERS = "Content-Type"

router = APIRouter()
extract_router = APIRouter()


@router.get("/health")
def health(request: Request):
    """Health check endpoint"""
    return {
        "status": "ok",
        "extract_enabled": request.app.state.settings.enable_extract_route,
    }


@router.post("/predict", response_model=PredictionResult)
def predict(record: MeasurementRecord, request: Request):
    predictor: Predictor = request.app.state.predictor
    label = predictor.predict(record)
    return PredictionResult(prediction=label)


@extract_router.post("/extract", response_model=ExtractionResult)
def extract(request: Request, image: Optional[UploadFile] = File(None)):
    if image is None:
        raise BadRequest("No image uploaded: form field 'image' is required")

    text_extractor: TextExtractor = request.app.state.text_extractor
    with scratch_upload(image.file) as image_path:
        text = text_extractor.extract(image_path)

    return ExtractionResult(extracted=extract_fields(text))


def _cors_headers(settings: Settings) -> dict:
    return {
        "Access-Control-Allow-Origin": settings.frontend_url,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request body"


def create_app(
    settings: Optional[Settings] = None,
    predictor: Optional[Predictor] = None,
    text_extractor: Optional[TextExtractor] = None,
) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Smart Disease Predictor Backend", version="1.0.0")
    app.state.settings = settings
    app.state.predictor = predictor or HttpPredictor(settings.ml_url, timeout=settings.predict_timeout)
    app.state.text_extractor = text_extractor or TesseractExtractor(
        settings.tesseract_cmd, settings.ocr_language, timeout=settings.ocr_timeout
    )

    app.include_router(router)
    if settings.enable_extract_route:
        app.include_router(extract_router)

    @app.middleware("http")
    async def cors(request: Request, call_next):
        # preflight never reaches the routes
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        response.headers.update(_cors_headers(settings))
        return response

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.1f} ms)")
        return response

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        # runs outside the cors middleware; the server logs the traceback itself
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers=_cors_headers(settings),
        )

    return app
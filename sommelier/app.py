from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog.config import CatalogConfig
from .catalog.loader import load_catalog
from .errors import CatalogUnavailable, ConfigError, SommelierError
from .llm.config import LLMConfig
from .pairing.config import PairingConfig
from .pairing.models import PairingRequest, PairingResult
from .pairing.responses import classify_unexpected, error_body
from .pairing.service import recommend_pairing

logger = logging.getLogger(__name__)

PAIRING_PATH = "/api/pairing"
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,POST",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(title="René AI Sommelier API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS", "POST"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    # Non-browser callers send no Origin header; they still get the headers.
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


# ── Configuration dependencies ───────────────────────────────────────────


def get_llm_config() -> LLMConfig:
    return LLMConfig.from_env()


def get_catalog_config() -> CatalogConfig:
    return CatalogConfig.from_env()


def get_pairing_config() -> PairingConfig:
    return PairingConfig.from_env()


def require_api_key(llm_config: LLMConfig = Depends(get_llm_config)) -> LLMConfig:
    """Raise a config error before the body is validated if no key is set."""
    if not llm_config.api_key:
        logger.error("GROQ_API_KEY is not configured")
        raise ConfigError("GROQ_API_KEY non configurata")
    return llm_config


# ── Error handlers ───────────────────────────────────────────────────────


@app.exception_handler(SommelierError)
def sommelier_error_handler(request: Request, exc: SommelierError) -> JSONResponse:
    body = error_body(exc, expose_details=get_pairing_config().expose_details)
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    content = {"error": "Richiesta non valida. Controllare i piatti selezionati."}
    if get_pairing_config().expose_details:
        content["details"] = str(exc.errors())
    return JSONResponse(status_code=400, content=content)


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        message = "Metodo non consentito. Utilizzare POST."
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


# ── Endpoints ────────────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/catalog")
def catalog(catalog_config: CatalogConfig = Depends(get_catalog_config)) -> dict:
    loaded = load_catalog(catalog_config)
    if not loaded.dishes:
        raise CatalogUnavailable("Nessun piatto trovato nel database")
    return loaded.model_dump(by_alias=True)


@app.options(PAIRING_PATH)
def pairing_preflight() -> Response:
    return Response(status_code=200)


@app.post(PAIRING_PATH, response_model=PairingResult)
def pairing(
    body: PairingRequest,
    llm_config: LLMConfig = Depends(require_api_key),
    catalog_config: CatalogConfig = Depends(get_catalog_config),
    pairing_config: PairingConfig = Depends(get_pairing_config),
) -> PairingResult:
    try:
        return recommend_pairing(body, llm_config, catalog_config, pairing_config)
    except SommelierError:
        raise
    except Exception as exc:
        logger.error("Unexpected error while building a pairing", exc_info=True)
        raise classify_unexpected(exc) from exc

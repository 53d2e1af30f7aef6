"""HTTP server exposing the calculation service."""
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress
import uvicorn

from calculator_app.common.logger import logger
from calculator_app.common.models import CalculationRequest
from calculator_app.server.calculator import Calculator


def create_app() -> FastAPI:
    """
    Build the calculation service application.

    Routes:
        - POST /calculate: add number1 and number2
        - GET /health: readiness probe used by the launch description

    :return: Configured FastAPI application
    :rtype: FastAPI
    """
    app = FastAPI(
        title="Calculation Service",
        description="Adds two numbers",
        version="0.1.0",
    )

    # Any origin may call the service
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Reject malformed calculation requests with a client error."""
        logger.warning(f"🖥️❌ Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=422, content={"detail": _jsonable_errors(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Log unexpected failures and answer with a server error instead of dropping the connection."""
        logger.error(f"🖥️❌ Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.post("/calculate")
    async def calculate(calculation: CalculationRequest) -> Response:
        """
        Add the two operands of the request body.

        The body is serialized by the model itself so that NaN and Infinity results
        are written as JSON constants rather than failing the response.
        """
        result = Calculator.calculate(calculation)
        return Response(content=result.model_dump_json(), media_type="application/json")

    @app.get("/health")
    async def health() -> dict:
        """Basic health check endpoint."""
        return {"status": "healthy", "service": "calculation"}

    return app


def _jsonable_errors(exc: RequestValidationError) -> list:
    """Keep only the JSON-safe parts of validation errors (the raw input may be NaN or bytes)."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


class CalculationServer(BaseModel):
    """
    HTTP server running the calculation service.

    Features:
        - Validates its binding configuration before starting.
        - Serves the FastAPI application with uvicorn until stopped.
    """

    # Network configuration must not change once the server is built
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=8000, ge=1, le=65535, description="Server TCP port")
    log_level: str = Field(default="info", description="Uvicorn log level")

    def start(self) -> None:
        """
        Start serving the calculation service.

        :return: None
        """
        logger.info(f"🖥️ Starting calculation service on {self.host}:{self.port}")
        uvicorn.run(create_app(), host=str(self.host), port=self.port, log_level=self.log_level.lower())
        logger.info("🖥️ Calculation service stopped")

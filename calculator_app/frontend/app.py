"""Web frontend collecting two numbers and displaying their sum."""
import math
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress
import uvicorn

from calculator_app.client.client import CalculationClient, CalculationServiceError
from calculator_app.common.logger import logger
from calculator_app.frontend.plot import render_result_plot

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def parse_number(raw: str, field: str) -> float:
    """
    Convert a form value into a float.

    :param str raw: Raw text submitted by the user
    :param str field: Field name, used in the error message

    :return: Parsed number
    :rtype: float
    :raises ValueError: If the value is empty or not a number
    """
    text = raw.strip()
    if not text:
        raise ValueError(f"{field} is required")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"{field} must be a number, got {raw!r}") from None


def create_app(client: Optional[CalculationClient] = None) -> FastAPI:
    """
    Build the frontend application.

    States:
        - idle: GET / shows the empty form
        - awaiting response: POST / waits for the single calculation round trip
        - displaying result: the result and its plot are rendered under the form

    :param CalculationClient client: Client used to reach the calculation service

    :return: Configured FastAPI application
    :rtype: FastAPI
    """
    app = FastAPI(title="Calculator", version="0.1.0")
    app.state.client = client or CalculationClient()

    def render(request: Request, status_code: int = 200, **context) -> HTMLResponse:
        values = {"number1": "", "number2": "", "result": None, "plot": None, "error": None}
        values.update(context)
        return templates.TemplateResponse(request, "index.html", values, status_code=status_code)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        """Display the empty calculator form."""
        return render(request)

    @app.post("/", response_class=HTMLResponse)
    def submit(request: Request, number1: str = Form(""), number2: str = Form("")) -> HTMLResponse:
        """Send the submitted numbers to the calculation service and display the result."""
        try:
            operand1 = parse_number(number1, "number1")
            operand2 = parse_number(number2, "number2")
        except ValueError as exc:
            logger.warning(f"🎨❌ Invalid input: {exc}")
            return render(request, status_code=400, number1=number1, number2=number2, error=str(exc))

        try:
            calculation = app.state.client.calculate(operand1, operand2)
        except CalculationServiceError as exc:
            logger.error(f"🎨❌ Calculation failed: {exc}")
            return render(request, status_code=502, number1=number1, number2=number2, error=str(exc))

        result: float = calculation.result
        plot: Optional[str] = None
        # A point at a non-finite coordinate cannot be drawn
        if math.isfinite(result):
            try:
                plot = render_result_plot(result)
            except (ValueError, OverflowError) as exc:
                logger.warning(f"🎨❌ Could not plot result {result}, displaying it without plot: {exc}")
        logger.info(f"🎨✅ Displaying result {result}")
        return render(request, number1=number1, number2=number2, result=result, plot=plot)

    return app


class FrontendServer(BaseModel):
    """
    HTTP server running the calculator frontend.

    Features:
        - Validates its binding configuration before starting.
        - Points the frontend at the configured calculation service.
    """

    # Network configuration must not change once the server is built
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=8501, ge=1, le=65535, description="Server TCP port")
    service_url: str = Field(default="http://127.0.0.1:8000", description="Calculation service base URL")
    log_level: str = Field(default="info", description="Uvicorn log level")

    def start(self) -> None:
        """
        Start serving the frontend.

        :return: None
        """
        logger.info(f"🎨 Starting frontend on {self.host}:{self.port} (service: {self.service_url})")
        app = create_app(CalculationClient(base_url=self.service_url))
        uvicorn.run(app, host=str(self.host), port=self.port, log_level=self.log_level.lower())
        logger.info("🎨 Frontend stopped")

# main.py

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Form
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

import calculator
import page
import schemas
from app.format.currency import CurrencyFormatter, get_formatter
from config import Settings, get_settings
from error_handlers import register_error_handlers
from observability import setup_logging

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)


# --- Dependencies ---
def get_currency_formatter(settings: Settings = Depends(get_settings)) -> CurrencyFormatter:
    return get_formatter(settings.currency_format)
# --------------------


def _render(settings: Settings, formatter: CurrencyFormatter, values=None, state=None) -> str:
    return page.render_page(
        title=settings.app_title,
        description=settings.app_description,
        formatter=formatter,
        footer_author=settings.footer_author,
        footer_url=settings.footer_url,
        values=values,
        state=state,
    )


@app.get("/", response_class=HTMLResponse)
def show_form(
    settings: Settings = Depends(get_settings),
    formatter: CurrencyFormatter = Depends(get_currency_formatter),
):
    """
    The calculator page, empty.
    """
    return _render(settings, formatter)


@app.post("/", response_class=HTMLResponse)
def submit_form(
    amount: Optional[str] = Form(None),
    sons: Optional[str] = Form(None),
    daughters: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    formatter: CurrencyFormatter = Depends(get_currency_formatter),
):
    """
    Form submission: re-render the page with the entered values and either
    the error message or each heir's share.
    """
    outcome = calculator.calculate_from_form(amount, sons, daughters)
    if not outcome.ok:
        logger.info(f"Rejected form submission: {outcome.error.value}", extra={"error_kind": outcome.error.value})
    values = {"amount": amount, "sons": sons, "daughters": daughters}
    return _render(settings, formatter, values=values, state=outcome.to_state())


@app.post("/calculate", response_model=schemas.CalculationState, response_model_exclude_none=True)
def api_calculate(payload: schemas.CalculationInput):
    """
    JSON variant of the form: {"error": ...} or {"success": true, "result": {...}}.
    """
    outcome = calculator.calculate_from_form(payload.amount, payload.sons, payload.daughters)
    if not outcome.ok:
        logger.info(f"Rejected calculation: {outcome.error.value}", extra={"error_kind": outcome.error.value})
    return outcome.to_state()


@app.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "healthy", "service": "faraid-anak"}

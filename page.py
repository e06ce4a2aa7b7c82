# page.py

from datetime import date
from html import escape
from typing import Dict, Optional

import schemas
from app.format.currency import CurrencyFormatter

STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f3f4f6; color: #111827; }
main { min-height: 100vh; display: flex; flex-direction: column; align-items: center; justify-content: center; padding: 1rem; }
h1 { font-size: 1.875rem; margin-bottom: 2rem; }
.card { max-width: 28rem; width: 100%; background: #fff; padding: 1.5rem; border-radius: .5rem; box-shadow: 0 1px 3px rgba(0,0,0,.15); margin-bottom: 6rem; }
label { display: block; font-size: .875rem; font-weight: 500; color: #374151; margin: 1rem 0 .5rem; }
input { width: 100%; box-sizing: border-box; padding: .5rem .75rem; border: 1px solid #d1d5db; border-radius: .375rem; }
button { width: 100%; margin-top: 1.5rem; padding: .5rem 1rem; background: #2563eb; color: #fff; border: 0; border-radius: .375rem; cursor: pointer; }
button:hover { background: #1d4ed8; }
.error { margin-top: 1.5rem; padding: 1rem; background: #fee2e2; color: #b91c1c; border-radius: .375rem; }
.result { margin-top: 1.5rem; padding: 1rem; background: #dcfce7; color: #15803d; border-radius: .375rem; }
.result h2 { font-size: 1.125rem; color: #166534; margin: 0 0 .5rem; }
footer { position: fixed; bottom: 0; width: 100%; padding: .75rem 0; background: #1f2937; color: #e5e7eb; text-align: center; font-family: monospace; }
footer a { color: #6366f1; }
"""

# number inputs: block '-' and 'e' the same way the original form did
NO_MINUS_OR_EXP = "if (event.key === '-' || event.key === 'e') event.preventDefault();"

FIELDS = (
    # name, label, placeholder, extra attributes
    ("amount", "Total Amount", "Enter total amount", 'step="any" required'),
    ("sons", "Number of Sons", "Enter number of sons", ""),
    ("daughters", "Number of Daughters", "Enter number of daughters", ""),
)


def _field(name: str, label: str, placeholder: str, extra: str, value: str) -> str:
    return (
        f'<label for="{name}">{label}</label>'
        f'<input type="number" name="{name}" id="{name}" min="0" {extra} '
        f'value="{escape(value)}" placeholder="{placeholder}" onkeydown="{NO_MINUS_OR_EXP}">'
    )


def render_state(state: Optional[schemas.CalculationState], formatter: CurrencyFormatter) -> str:
    """Error box, result box, or nothing before the first submission."""
    if state is None:
        return ""
    if state.error:
        return f'<div class="error">{escape(state.error)}</div>'
    if state.success and state.result:
        return (
            '<div class="result"><h2>Results:</h2>'
            f"<p>Each Son&apos;s Share: {escape(formatter.format(state.result.son_share))}</p>"
            f"<p>Each Daughter&apos;s Share: {escape(formatter.format(state.result.daughter_share))}</p>"
            "</div>"
        )
    return ""


def render_footer(author: str, url: str, year: Optional[int] = None) -> str:
    year = year or date.today().year
    return (
        f'<footer>Developed by <a href="{escape(url)}">{escape(author)}</a> &copy; {year}</footer>'
    )


def render_page(
    *,
    title: str,
    description: str,
    formatter: CurrencyFormatter,
    footer_author: str,
    footer_url: str,
    values: Optional[Dict[str, str]] = None,
    state: Optional[schemas.CalculationState] = None,
) -> str:
    values = values or {}
    fields = "".join(
        _field(name, label, placeholder, extra, values.get(name) or "")
        for name, label, placeholder, extra in FIELDS
    )
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{escape(title)}</title>"
        f'<meta name="description" content="{escape(description)}">'
        f"<style>{STYLE}</style></head><body><main>"
        f"<h1>{escape(title)}</h1>"
        '<div class="card"><form method="post" action="/">'
        f'{fields}<button type="submit">Calculate</button></form>'
        f"{render_state(state, formatter)}</div></main>"
        f"{render_footer(footer_author, footer_url)}"
        "</body></html>"
    )

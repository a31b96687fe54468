"""
Invoice/Receipt generation service.

Generates a printable HTML receipt for an order and, when available, a PDF
using headless Chromium (Playwright). PDF rendering is optional; the HTML is
always returned.
"""

from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from typing import Dict, Optional

from meatshop.domain.entities.order_entity import Order, OrderStatus
from meatshop.domain.entities.settings_entity import ShopSettings
from meatshop.domain.value_objects.money import format_currency

logger = logging.getLogger(__name__)


def _format_weight(quantity_in_kg: float) -> str:
    return f"{quantity_in_kg:g}kg"


def _placed_on(timestamp: str) -> str:
    try:
        return datetime.fromisoformat(timestamp).strftime("%d/%m/%Y")
    except (TypeError, ValueError):
        return timestamp or ""


def order_confirmation_text(order: Order, symbol: str = "₹") -> str:
    """Message the customer sends the shop right after checkout"""
    return (
        f"Hi! I've placed an order (#{order.short_ref}). "
        f"Total: {format_currency(order.total, symbol)}. Please confirm."
    )


def receipt_share_text(order: Order, symbol: str = "₹") -> str:
    return f"Receipt for Order #{order.short_ref}. Total: {format_currency(order.total, symbol)}"


def build_invoice_html(order: Order, settings: ShopSettings, symbol: str = "₹") -> str:
    """Build a minimal printable HTML receipt"""
    money = lambda amount: format_currency(amount, symbol)  # noqa: E731

    items_html = []
    for item in order.items:
        items_html.append(
            "<tr>"
            f"<td>{escape(item.name)}<div class='muted'>"
            f"{_format_weight(item.quantity_in_kg)} × {money(item.price)}</div></td>"
            f"<td class='r'>{money(item.line_total)}</td>"
            "</tr>"
        )

    totals = [
        ("Subtotal", money(order.subtotal)),
        ("Delivery Charge", money(order.delivery_charge) if order.delivery_charge > 0 else "FREE"),
    ]
    if order.tax:
        totals.append(("Tax", money(order.tax)))
    if order.discount > 0:
        totals.append(("Adjustment", f"-{money(order.discount)}"))
    totals_html = "".join(
        f"<tr><td>{label}</td><td class='r'>{value}</td></tr>" for label, value in totals
    )

    location_html = ""
    if order.location:
        location_html = f"<div><a href='{escape(order.location)}'>Live GPS</a></div>"

    status_class = "done" if order.status == OrderStatus.DELIVERED else "open"
    lock_label = "Finalized" if order.is_finalized else "Draft"

    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Order Receipt #{escape(order.short_ref)}</title>
  <style>
    @page {{ size: A4; margin: 15mm; }}
    body {{ font-family: Arial, Helvetica, sans-serif; color: #111; }}
    .header {{ display: flex; justify-content: space-between; border-bottom: 1px solid #ddd; padding-bottom: 8px; }}
    .header img {{ width: 64px; height: 64px; object-fit: cover; border-radius: 12px; }}
    .muted {{ font-size: 12px; color: #777; }}
    .meta {{ display: flex; justify-content: space-between; margin: 12px 0; font-size: 13px; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
    td {{ padding: 6px 4px; border-bottom: 1px solid #eee; }}
    tfoot td {{ border-top: 2px solid #111; font-weight: bold; font-size: 20px; }}
    .r {{ text-align: right; }}
    .open {{ color: #ea580c; }}
    .done {{ color: #16a34a; }}
    @media print {{ .no-print {{ display: none !important; }} }}
  </style>
</head>
<body>
  <div class="header">
    <div>
      <img src="{escape(settings.logo)}" alt="Logo" />
      <h2>{escape(settings.shop_name)}</h2>
      <div class="muted">Premium Fresh Meat</div>
    </div>
    <div class="r">
      <div class="muted">Status</div>
      <strong class="{status_class}">{escape(order.status.value)}</strong>
      <div class="muted">{lock_label}</div>
    </div>
  </div>

  <div class="meta">
    <div>
      <div class="muted">Customer</div>
      <strong>{escape(order.customer_name)}</strong>
      <div>{escape(order.phone)}</div>
      <div class="muted">{escape(order.address)}</div>
      {location_html}
    </div>
    <div class="r">
      <div class="muted">Placed On</div>
      <strong>{escape(_placed_on(order.timestamp))}</strong>
      <div class="muted">Order ID</div>
      <strong>#{escape(order.short_ref)}</strong>
      <div class="muted">Payment: {escape(order.payment_method.value)}</div>
    </div>
  </div>

  <table>
    <tbody>
      {''.join(items_html)}
      {totals_html}
    </tbody>
    <tfoot>
      <tr><td>Net Pay</td><td class='r'>{money(order.total)}</td></tr>
    </tfoot>
  </table>
</body>
</html>
"""


async def generate_pdf_from_html(html: str) -> Optional[bytes]:
    """Generate a PDF from HTML using Playwright Chromium, if available.
    Returns PDF bytes or None on failure.
    """
    try:
        from playwright.async_api import async_playwright
    except ImportError as e:
        logger.warning("Playwright not available for PDF generation: %s", e)
        return None

    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch(
                args=["--no-sandbox", "--disable-dev-shm-usage", "--disable-gpu"]
            )
            page = await browser.new_page()
            await page.set_content(html, wait_until="load")
            pdf_bytes = await page.pdf(format="A4", print_background=True)
            await browser.close()
            return pdf_bytes
    except Exception as e:  # pylint: disable=broad-except
        logger.error("Failed to render PDF via Playwright: %s", e)
        return None


async def build_invoice(
    order: Order, settings: ShopSettings, symbol: str = "₹", with_pdf: bool = False
) -> Dict[str, Optional[bytes] | str]:
    """Build the invoice HTML and optionally a PDF of it.

    Returns dict: {"html": str, "pdf": bytes|None}
    """
    html = build_invoice_html(order, settings, symbol)
    pdf = await generate_pdf_from_html(html) if with_pdf else None
    return {"html": html, "pdf": pdf}

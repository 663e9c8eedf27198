import logging
import os
from dataclasses import dataclass
from io import BytesIO
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .. import models

logger = logging.getLogger(__name__)

BRAND = "GIGS.lk"
TAGLINE = "Perform your World"


@dataclass
class ReceiptParty:
    """Name and email printed for the host or the artist."""

    name: Optional[str]
    email: Optional[str]


UNKNOWN_HOST = ReceiptParty(name="Unknown Host", email="-")
UNKNOWN_ARTIST = ReceiptParty(name="Unknown Artist", email="-")


def _text(value) -> str:
    if value is None or value == "":
        return "-"
    return escape(str(value))


def _logo(logo_path: Optional[str]):
    if not logo_path or not os.path.exists(logo_path):
        return None
    try:
        width_px, height_px = ImageReader(logo_path).getSize()
    except Exception as exc:
        logger.warning("Receipt logo unreadable at %s: %s", logo_path, exc)
        return None
    width = 32 * mm
    return Image(logo_path, width=width, height=width * height_px / float(width_px))


def generate_booking_receipt(
    booking: models.Booking,
    host: Optional[ReceiptParty],
    artist: Optional[ReceiptParty],
    logo_path: Optional[str] = None,
) -> bytes:
    """Render the booking receipt PDF and return its bytes.

    Layout: optional logo and brand header, receipt title, booking fields,
    host and artist identity, event location and notes, footer. A missing
    host or artist prints placeholder text instead of failing.
    """
    if host is None:
        logger.warning("Receipt for booking %s rendered without host details", booking.id)
        host = UNKNOWN_HOST
    if artist is None:
        logger.warning("Receipt for booking %s rendered without artist details", booking.id)
        artist = UNKNOWN_ARTIST

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=f"Booking Receipt {booking.id}",
        author=BRAND,
    )
    brand = colors.HexColor("#8b5cf6")
    muted = colors.HexColor("#888888")

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="Brand", parent=styles["Heading1"], fontName="Helvetica-Bold", fontSize=22, textColor=brand, leading=26))
    styles.add(ParagraphStyle(name="ReceiptTitle", parent=styles["Heading2"], fontSize=16, textColor=colors.HexColor("#333333"), alignment=2))
    styles.add(ParagraphStyle(name="Field", parent=styles["Normal"], fontName="Helvetica", fontSize=12, leading=16))
    styles.add(ParagraphStyle(name="Footer", parent=styles["Normal"], fontName="Helvetica", fontSize=10, textColor=muted))

    story = []

    brand_cell = Paragraph(f"{BRAND} <font size='12' color='#6b7280'>{TAGLINE}</font>", styles["Brand"])
    logo = _logo(logo_path)
    if logo is not None:
        header = Table([[logo, brand_cell]], colWidths=[36 * mm, doc.width - 36 * mm], hAlign="LEFT")
    else:
        header = Table([[brand_cell]], colWidths=[doc.width], hAlign="LEFT")
    header.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "MIDDLE")]))
    story.append(header)
    story.append(Spacer(1, 4))
    story.append(Paragraph("Booking Receipt", styles["ReceiptTitle"]))
    story.append(Spacer(1, 10))

    event_when = " ".join(p for p in (str(booking.event_date or ""), str(booking.event_time or "")) if p)
    sections = [
        [
            ("Booking ID", booking.id),
            ("Booking Date", event_when),
            ("Payment Method", booking.payment_method),
            ("Amount Paid", f"LKR {booking.price}" if booking.price is not None else None),
        ],
        [
            ("Host", host.name),
            ("Host Email", host.email),
        ],
        [
            ("Artist", artist.name),
            ("Artist Email", artist.email),
        ],
        [
            ("Event Location", booking.event_location),
            ("Notes", booking.notes),
        ],
    ]
    for fields in sections:
        for label, value in fields:
            story.append(Paragraph(f"{label}: {_text(value)}", styles["Field"]))
        story.append(Spacer(1, 8))

    story.append(Spacer(1, 12))
    story.append(Paragraph(f"Thank you for booking with {BRAND}!", styles["Footer"]))

    doc.build(story)
    buffer.seek(0)
    return buffer.read()

"""PDF confirmation documents rendered with reportlab.

Both renderers take the nested camelCase booking payload (see
:mod:`apps.notifications.payloads`) and return the PDF as bytes.
"""

from __future__ import annotations

import math
import re
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from apps.bookings import booking_ids
from apps.bookings.dates import safe_parse_date
from apps.bookings.models import DOUBLE_BED_RATE, EXTRA_BED_RATE, SINGLE_BED_RATE

VENUE_NAME = "Wisma Nusantara Cairo"
CONTACT_LINE = "WhatsApp: +20 123 456 7890 | Email: info@wismanusantara.com"

AIRPORT_PICKUP_RATES = {"medium_vehicle": 35, "hiace": 50}
AIRPORT_PICKUP_LABELS = {
    "none": "Tidak",
    "medium_vehicle": "Medium private vehicle (2-4 pax)",
    "hiace": "Hiace (up to 10 pax + luggage)",
}

ID_MONTHS = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)
ID_WEEKDAYS = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")

HOSTEL_TERMS = (
    (
        "1. Jam Check-in / Check-in Time",
        "Check-in mulai pukul 14.00 waktu Kairo.",
        "Check-in starts at 14:00 Cairo time.",
    ),
    (
        "2. Jam Check-out / Check-out Time",
        "Check-out paling lambat pukul 12.00 waktu Kairo.",
        "Check-out is at 12:00 Cairo time at the latest.",
    ),
    (
        "3. Kebijakan Merokok / Smoking Policy",
        "Dilarang merokok di dalam kamar dan area umum.",
        "Smoking is not allowed in rooms and shared areas.",
    ),
    (
        "4. Perubahan Syarat / Terms Modification",
        "Pengelola berhak mengubah syarat dan ketentuan sewaktu-waktu.",
        "Management may change these terms at any time.",
    ),
)

_FILENAME_SPACES = re.compile(r"\s+")


def format_long_date(value) -> str:
    """Indonesian long date, e.g. ``Kamis, 11 Januari 2024``."""
    instant = safe_parse_date(value)
    return (
        f"{ID_WEEKDAYS[instant.weekday()]}, {instant.day} "
        f"{ID_MONTHS[instant.month - 1]} {instant.year}"
    )


def format_usd(amount) -> str:
    return f"${amount:,.2f}"


def _iso_day(value) -> str:
    return safe_parse_date(value).date().isoformat()


def _slug(text: str) -> str:
    return _FILENAME_SPACES.sub("_", text or "").lower()


def hostel_pdf_filename(booking_data: dict, booking_id=None) -> str:
    check_in = (booking_data.get("stayDuration") or {}).get("checkInDate")
    return (
        f"hostel_booking_{_slug(booking_data.get('fullName', ''))}_"
        f"{_iso_day(check_in)}_{booking_id or 'confirmation'}.pdf"
    )


def auditorium_pdf_filename(booking_data: dict, booking_id=None) -> str:
    event = booking_data.get("eventDetails") or {}
    return (
        f"auditorium_booking_{_slug(event.get('eventName', ''))}_"
        f"{_iso_day(event.get('eventDate'))}_{booking_id or 'confirmation'}.pdf"
    )


def hostel_pricing(booking_data: dict) -> dict:
    rooms = booking_data.get("roomSelection") or {}
    stay = booking_data.get("stayDuration") or {}
    check_in = safe_parse_date(stay.get("checkInDate"))
    check_out = safe_parse_date(stay.get("checkOutDate"))
    nights = max(math.ceil((check_out - check_in).total_seconds() / 86400), 0)

    per_night = (
        int(rooms.get("singleBed") or 0) * SINGLE_BED_RATE
        + int(rooms.get("doubleBed") or 0) * DOUBLE_BED_RATE
        + int(rooms.get("extraBed") or 0) * EXTRA_BED_RATE
    )
    room_cost = per_night * nights
    services_cost = AIRPORT_PICKUP_RATES.get(booking_data.get("airportPickup") or "none", 0)
    return {
        "nights": nights,
        "roomCost": room_cost,
        "servicesCost": services_cost,
        "totalCost": room_cost + services_cost,
    }


class _Builder:
    """Collects platypus flowables for one confirmation document."""

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self.story = []

    def para(self, text, style="BodyText"):
        self.story.append(Paragraph(escape(str(text)), self.styles[style]))

    def spacer(self, height=6):
        self.story.append(Spacer(1, height))

    def header(self, title, subtitle, booking_id):
        self.para(title, "Title")
        self.para(VENUE_NAME, "Heading3")
        self.para(subtitle)
        if booking_id:
            self.para(f"Booking ID: {booking_id}", "Heading4")
        self.spacer(10)

    def section(self, title, rows):
        rows = [(label, value) for label, value in rows if value not in (None, "")]
        if not rows:
            return
        self.para(title, "Heading2")
        table = Table(
            [[label, Paragraph(escape(str(value)), self.styles["BodyText"])] for label, value in rows],
            colWidths=[55 * mm, 110 * mm],
        )
        table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#374151")),
                    ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.lightgrey),
                ]
            )
        )
        self.story.append(table)
        self.spacer(8)

    def bullets(self, title, items):
        self.para(title, "Heading2")
        for item in items:
            self.para(f"• {item}")
        self.spacer(8)

    def footer(self):
        self.spacer(12)
        self.para("Butuh bantuan? Hubungi customer service kami", "Italic")
        self.para(CONTACT_LINE)
        self.para(f"{VENUE_NAME} - Your Home Away From Home", "Italic")

    def build(self, title) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            title=title,
            author=VENUE_NAME,
            leftMargin=20 * mm,
            rightMargin=20 * mm,
            topMargin=18 * mm,
            bottomMargin=18 * mm,
        )
        doc.build(self.story)
        content = buffer.getvalue()
        buffer.close()
        return content


def render_hostel_pdf(booking_data: dict, booking_id=None) -> bytes:
    rooms = booking_data.get("roomSelection") or {}
    guests = booking_data.get("guestDetails") or {}
    stay = booking_data.get("stayDuration") or {}
    contact = booking_data.get("contactInfo") or {}
    pricing = hostel_pricing(booking_data)
    pickup = booking_data.get("airportPickup") or "none"

    builder = _Builder()
    builder.header(
        "KONFIRMASI BOOKING HOSTEL",
        f"Booking berhasil untuk {booking_data.get('fullName', '')}",
        booking_id,
    )
    builder.section(
        "Informasi Personal",
        [
            ("Nama Lengkap:", booking_data.get("fullName")),
            ("Asal Negara:", booking_data.get("countryOfOrigin")),
            ("Nomor Paspor:", booking_data.get("passportNumber")),
        ],
    )
    builder.section(
        "Pilihan Kamar",
        [
            ("Single Bed Room:", f"{rooms['singleBed']} kamar" if rooms.get("singleBed") else None),
            ("Double Bed Room:", f"{rooms['doubleBed']} kamar" if rooms.get("doubleBed") else None),
            ("Extra Bed:", f"{rooms['extraBed']} tempat" if rooms.get("extraBed") else None),
            (
                "Total Tamu:",
                f"{guests.get('adults', 0)} dewasa, {guests.get('children', 0)} anak",
            ),
        ],
    )
    builder.section(
        "Durasi Menginap",
        [
            ("Check-in:", format_long_date(stay.get("checkInDate"))),
            ("Check-out:", format_long_date(stay.get("checkOutDate"))),
            ("Lama Menginap:", f"{pricing['nights']} malam"),
        ],
    )
    builder.section(
        "Informasi Kontak",
        [
            ("WhatsApp:", contact.get("whatsappNumber")),
            ("Telepon:", contact.get("phoneNumber")),
        ],
    )
    builder.section(
        "Layanan Tambahan",
        [
            ("Airport Pickup:", AIRPORT_PICKUP_LABELS.get(pickup, pickup) if pickup != "none" else None),
            ("Kode Kupon:", booking_data.get("couponCode")),
        ],
    )
    builder.section(
        "Ringkasan Biaya",
        [
            (f"Kamar ({pricing['nights']} malam):", format_usd(pricing["roomCost"])),
            (
                "Layanan Tambahan:",
                format_usd(pricing["servicesCost"]) if pricing["servicesCost"] else None,
            ),
            ("Total:", format_usd(pricing["totalCost"])),
        ],
    )
    builder.bullets(
        "Langkah Selanjutnya",
        [
            "Anda akan menerima konfirmasi booking melalui email dalam 1-2 jam",
            "Tim kami akan menghubungi Anda via WhatsApp dalam 24 jam untuk konfirmasi pembayaran",
            "Simpan dokumen ini sebagai referensi booking Anda",
        ],
    )
    builder.footer()

    builder.story.append(PageBreak())
    builder.para("SYARAT DAN KETENTUAN", "Title")
    builder.para("TERMS OF SERVICE", "Heading3")
    for title, text_id, text_en in HOSTEL_TERMS:
        builder.para(title, "Heading4")
        builder.para(text_id)
        builder.para(text_en, "Italic")

    return builder.build("Konfirmasi Booking Hostel")


def render_auditorium_pdf(booking_data: dict, booking_id=None) -> bytes:
    event = booking_data.get("eventDetails") or {}
    contact = booking_data.get("contactInfo") or {}
    event_time = event.get("eventTime") or ""
    if event.get("eventEndTime"):
        event_time = f"{event_time} - {event['eventEndTime']}"

    builder = _Builder()
    builder.header(
        "KONFIRMASI BOOKING AUDITORIUM",
        f"Booking berhasil untuk {booking_data.get('fullName', '')}",
        booking_id,
    )
    builder.section(
        "Detail Acara",
        [
            ("Nama Acara:", event.get("eventName")),
            ("Tanggal Acara:", format_long_date(event.get("eventDate"))),
            ("Waktu Acara:", event_time),
        ],
    )
    builder.section(
        "Informasi Personal",
        [
            ("Nama Lengkap:", booking_data.get("fullName")),
            ("Asal Negara:", booking_data.get("countryOfOrigin")),
        ],
    )
    builder.section(
        "Informasi Kontak",
        [
            ("Nomor Telepon Egypt:", contact.get("egyptPhoneNumber")),
            ("WhatsApp:", contact.get("whatsappNumber")),
        ],
    )
    builder.section(
        "Informasi Tambahan",
        [
            ("Kode Kupon:", booking_data.get("couponCode")),
            ("Catatan Acara:", booking_data.get("eventNotes")),
        ],
    )
    builder.bullets(
        "Langkah Selanjutnya",
        [
            "Tim kami akan memeriksa ketersediaan auditorium untuk tanggal acara Anda",
            "Kami akan menghubungi Anda via WhatsApp dalam 24 jam untuk konfirmasi",
            "Simpan dokumen ini sebagai referensi booking Anda",
        ],
    )
    builder.footer()
    return builder.build("Konfirmasi Booking Auditorium")


def render_confirmation(booking_type: str, booking_data: dict, booking_id=None):
    """Return ``(filename, pdf_bytes)`` for a hostel or auditorium payload."""
    if booking_type == booking_ids.HOSTEL:
        return (
            hostel_pdf_filename(booking_data, booking_id),
            render_hostel_pdf(booking_data, booking_id),
        )
    if booking_type == booking_ids.AUDITORIUM:
        return (
            auditorium_pdf_filename(booking_data, booking_id),
            render_auditorium_pdf(booking_data, booking_id),
        )
    raise ValueError(f"Unknown booking type: {booking_type!r}")

"""Indonesian WhatsApp captions sent along with the confirmation PDF."""

from __future__ import annotations

from apps.bookings.dates import safe_parse_date

PENDING_BOOKING_ID = "Menunggu konfirmasi"


def format_short_date(value) -> str:
    """``d/m/yyyy`` without zero padding, the way Indonesian dates are written."""
    instant = safe_parse_date(value)
    return f"{instant.day}/{instant.month}/{instant.year}"


def _lines(*lines):
    return "\n".join(line for line in lines if line is not None)


def hostel_confirmation_text(booking_data: dict, booking_id=None) -> str:
    rooms = booking_data.get("roomSelection") or {}
    stay = booking_data.get("stayDuration") or {}
    contact = booking_data.get("contactInfo") or {}

    return _lines(
        "🏨 *Konfirmasi Booking Hostel - Wisma Nusantara*",
        "",
        f"Halo {booking_data.get('fullName', '')}! 👋",
        "",
        "Terima kasih telah melakukan booking hostel. Berikut detail booking Anda:",
        "",
        "📋 *Detail Booking:*",
        f"• ID Booking: {booking_id or PENDING_BOOKING_ID}",
        f"• Nama: {booking_data.get('fullName', '')}",
        f"• Negara: {booking_data.get('countryOfOrigin', '')}",
        f"• Check-in: {format_short_date(stay.get('checkInDate'))}",
        f"• Check-out: {format_short_date(stay.get('checkOutDate'))}",
        "",
        "🛏️ *Kamar:*",
        f"• Single Bed: {rooms['singleBed']} kamar" if rooms.get("singleBed") else None,
        f"• Double Bed: {rooms['doubleBed']} kamar" if rooms.get("doubleBed") else None,
        f"• Extra Bed: {rooms['extraBed']} bed" if rooms.get("extraBed") else None,
        "",
        "📞 *Kontak:*",
        f"• WhatsApp: {contact.get('whatsappNumber', '')}",
        f"• Telepon: {contact.get('phoneNumber', '')}",
        "",
        "📄 File konfirmasi PDF terlampir di pesan ini.",
        "",
        "✅ *Status:* Menunggu konfirmasi pembayaran",
        "💰 Tim kami akan menghubungi Anda dalam 24 jam untuk proses pembayaran.",
        "",
        "Terima kasih! 🙏",
        "*Tim Wisma Nusantara*",
    )


def auditorium_confirmation_text(booking_data: dict, booking_id=None) -> str:
    event = booking_data.get("eventDetails") or {}
    contact = booking_data.get("contactInfo") or {}
    notes = booking_data.get("eventNotes")

    return _lines(
        "🎭 *Konfirmasi Booking Auditorium - Wisma Nusantara*",
        "",
        f"Halo {booking_data.get('fullName', '')}! 👋",
        "",
        "Terima kasih telah melakukan booking auditorium. Berikut detail booking Anda:",
        "",
        "📋 *Detail Booking:*",
        f"• ID Booking: {booking_id or PENDING_BOOKING_ID}",
        f"• Nama: {booking_data.get('fullName', '')}",
        f"• Negara: {booking_data.get('countryOfOrigin', '')}",
        "",
        "🎪 *Detail Event:*",
        f"• Nama Event: {event.get('eventName', '')}",
        f"• Tanggal: {format_short_date(event.get('eventDate'))}",
        f"• Waktu: {event.get('eventTime', '')}",
        "",
        "📞 *Kontak:*",
        f"• Telepon Egypt: {contact.get('egyptPhoneNumber', '')}",
        f"• WhatsApp: {contact.get('whatsappNumber', '')}",
        "",
        f"📝 *Catatan:* {notes}" if notes else None,
        "" if notes else None,
        "📄 File konfirmasi PDF terlampir di pesan ini.",
        "",
        "✅ *Status:* Menunggu konfirmasi ketersediaan",
        "📞 Tim kami akan menghubungi Anda dalam 24 jam untuk konfirmasi.",
        "",
        "Terima kasih! 🙏",
        "*Tim Wisma Nusantara*",
    )

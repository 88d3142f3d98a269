import django.core.validators
from django.db import migrations, models


PHONE_VALIDATOR = django.core.validators.RegexValidator(
    "^\\+?[1-9]\\d{1,14}$", "Please enter a valid phone number"
)
TIME_VALIDATOR = django.core.validators.RegexValidator(
    "^([01]?[0-9]|2[0-3]):[0-5][0-9]$", "Please enter time in HH:MM format (24-hour)"
)
PAYMENT_STATUS_CHOICES = [
    ("PAID", "Lunas"),
    ("DOWNPAYMENT", "Uang Muka"),
    ("INVOICED", "Menunggu Pembayaran"),
]
MEAL_OPTION_CHOICES = [
    ("none", "No thanks"),
    ("nasi_goreng", "Paket Nasi Goreng 100 EGP/PAX [Minimal 4 pax]"),
    ("ayam_goreng", "Paket Ayam Goreng 120 EGP/PAX [Minimal 4 pax]"),
    ("nasi_kuning", "Paket Nasi Kuning 130 EGP/PAX [Minimal 10pax]"),
]
MEAL_FREQUENCY_CHOICES = [
    ("checkin_only", "Hanya saat check-in"),
    ("during_stay", "Selama menginap"),
    ("checkout_only", "Hanya saat akan check-out"),
]


def common_fields():
    return [
        (
            "id",
            models.BigAutoField(
                auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
            ),
        ),
        ("full_name", models.CharField(max_length=200, verbose_name="Nama Lengkap")),
        ("country_of_origin", models.CharField(max_length=100, verbose_name="Asal Negara")),
        (
            "whatsapp_number",
            models.CharField(
                max_length=20, validators=[PHONE_VALIDATOR], verbose_name="Nomor WhatsApp"
            ),
        ),
        ("coupon_code", models.CharField(blank=True, max_length=50)),
        ("accept_terms", models.BooleanField(default=False)),
        (
            "payment_status",
            models.CharField(
                choices=PAYMENT_STATUS_CHOICES,
                default="INVOICED",
                max_length=20,
                verbose_name="Status Pembayaran",
            ),
        ),
        (
            "display_booking_id",
            models.CharField(
                blank=True,
                db_index=True,
                editable=False,
                help_text="Assigned once after creation, e.g. HST-12.",
                max_length=40,
            ),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


def meal_fields(meal):
    return [
        (
            f"{meal}_option",
            models.CharField(choices=MEAL_OPTION_CHOICES, default="none", max_length=20),
        ),
        (f"{meal}_portions", models.PositiveSmallIntegerField(blank=True, null=True)),
        (
            f"{meal}_frequency",
            models.CharField(blank=True, choices=MEAL_FREQUENCY_CHOICES, max_length=20),
        ),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="HostelBooking",
            fields=common_fields()
            + [
                (
                    "passport_number",
                    models.CharField(
                        max_length=50,
                        validators=[django.core.validators.MinLengthValidator(6)],
                        verbose_name="Nomor Paspor",
                    ),
                ),
                ("single_bed", models.PositiveSmallIntegerField(default=0)),
                ("double_bed", models.PositiveSmallIntegerField(default=0)),
                ("extra_bed", models.PositiveSmallIntegerField(default=0)),
                (
                    "adults",
                    models.PositiveSmallIntegerField(
                        default=1,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(40),
                        ],
                    ),
                ),
                (
                    "children",
                    models.PositiveSmallIntegerField(
                        default=0, validators=[django.core.validators.MaxValueValidator(40)]
                    ),
                ),
                ("check_in_date", models.DateTimeField(verbose_name="Tanggal Check-in")),
                ("check_out_date", models.DateTimeField(verbose_name="Tanggal Check-out")),
                (
                    "phone_number",
                    models.CharField(
                        max_length=20, validators=[PHONE_VALIDATOR], verbose_name="Nomor Telepon"
                    ),
                ),
                (
                    "airport_pickup",
                    models.CharField(
                        choices=[
                            ("none", "No, thanks"),
                            ("medium_vehicle", "Medium private vehicle (2-4 pax) [35 USD]"),
                            ("hiace", "Hiace (up to 10pax + luggage) [50 USD]"),
                        ],
                        default="none",
                        max_length=20,
                    ),
                ),
                (
                    "departure_date",
                    models.DateTimeField(blank=True, null=True, verbose_name="Tanggal Berangkat"),
                ),
                (
                    "departure_time",
                    models.CharField(
                        blank=True,
                        max_length=5,
                        validators=[TIME_VALIDATOR],
                        verbose_name="Waktu Berangkat",
                    ),
                ),
            ]
            + meal_fields("breakfast")
            + meal_fields("lunch")
            + meal_fields("dinner")
            + [
                (
                    "price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        editable=False,
                        max_digits=10,
                        null=True,
                        verbose_name="Price (USD)",
                    ),
                ),
                ("booking_notes", models.TextField(blank=True, verbose_name="Catatan Booking")),
            ],
            options={
                "verbose_name": "Hostel booking",
                "verbose_name_plural": "Hostel bookings",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(
                        fields=["check_in_date", "check_out_date"], name="hostel_stay_idx"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="AuditoriumBooking",
            fields=common_fields()
            + [
                ("event_name", models.CharField(max_length=200, verbose_name="Nama Acara")),
                ("event_date", models.DateTimeField(verbose_name="Tanggal Acara")),
                (
                    "event_time",
                    models.CharField(
                        max_length=5, validators=[TIME_VALIDATOR], verbose_name="Waktu Acara"
                    ),
                ),
                (
                    "event_end_time",
                    models.CharField(
                        blank=True,
                        max_length=5,
                        validators=[TIME_VALIDATOR],
                        verbose_name="Waktu Selesai",
                    ),
                ),
                (
                    "egypt_phone_number",
                    models.CharField(max_length=20, verbose_name="Nomor Telepon Mesir"),
                ),
                ("air_conditioner", models.CharField(default="none", max_length=30)),
                ("extra_chairs", models.CharField(default="none", max_length=30)),
                ("projector", models.CharField(default="none", max_length=30)),
                ("extra_tables", models.CharField(default="none", max_length=30)),
                ("plates", models.CharField(default="none", max_length=30)),
                ("glasses", models.CharField(default="none", max_length=30)),
                ("event_notes", models.TextField(blank=True, verbose_name="Catatan Acara")),
            ],
            options={
                "verbose_name": "Auditorium booking",
                "verbose_name_plural": "Auditorium bookings",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [models.Index(fields=["event_date"], name="auditorium_event_date_idx")],
            },
        ),
    ]

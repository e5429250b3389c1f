import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=80)),
                ("date_of_birth", models.DateField()),
                ("whatsapp_number", models.CharField(max_length=25, unique=True)),
                ("email", models.EmailField(blank=True, max_length=254, null=True, unique=True)),
                ("is_minor", models.BooleanField(default=False)),
                ("guardian_full_name", models.CharField(blank=True, max_length=80, null=True)),
                ("guardian_date_of_birth", models.DateField(blank=True, null=True)),
                ("guardian_whatsapp_number", models.CharField(blank=True, max_length=25, null=True)),
                ("phone_verified", models.BooleanField(default=False)),
                ("terms_accepted", models.BooleanField(default=False)),
                ("terms_accepted_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "customers",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="CustomerConsole",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("console_type", models.CharField(max_length=40)),
                ("is_retro", models.BooleanField(default=False)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="consoles",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "db_table": "customer_consoles",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("customer", "console_type", "is_retro"), name="uniq_customer_console"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="CustomerGiftCard",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("gift_card_type", models.CharField(max_length=40)),
                ("username", models.CharField(blank=True, max_length=254, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="gift_cards",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "db_table": "customer_gift_cards",
                "constraints": [
                    models.UniqueConstraint(fields=("customer", "gift_card_type"), name="uniq_customer_gift_card")
                ],
            },
        ),
        migrations.CreateModel(
            name="CustomerShoppingCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("category", models.CharField(max_length=20)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="shopping_categories",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "db_table": "customer_shopping_categories",
                "constraints": [
                    models.UniqueConstraint(fields=("customer", "category"), name="uniq_customer_category")
                ],
            },
        ),
    ]

# app/customers/models.py
from django.db import models


class Customer(models.Model):
    full_name = models.CharField(max_length=80)
    date_of_birth = models.DateField()
    whatsapp_number = models.CharField(max_length=25, unique=True)  # 정규화된 +E.164
    email = models.EmailField(max_length=254, unique=True, null=True, blank=True)
    is_minor = models.BooleanField(default=False)

    guardian_full_name = models.CharField(max_length=80, null=True, blank=True)
    guardian_date_of_birth = models.DateField(null=True, blank=True)
    guardian_whatsapp_number = models.CharField(max_length=25, null=True, blank=True)

    phone_verified = models.BooleanField(default=False)
    terms_accepted = models.BooleanField(default=False)
    terms_accepted_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.id} {self.full_name}"


class CustomerGiftCard(models.Model):
    customer = models.ForeignKey(Customer, on_delete=models.CASCADE, related_name="gift_cards")
    gift_card_type = models.CharField(max_length=40)
    username = models.CharField(max_length=254, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "customer_gift_cards"
        constraints = [
            models.UniqueConstraint(fields=["customer", "gift_card_type"], name="uniq_customer_gift_card"),
        ]


class CustomerConsole(models.Model):
    customer = models.ForeignKey(Customer, on_delete=models.CASCADE, related_name="consoles")
    console_type = models.CharField(max_length=40)
    is_retro = models.BooleanField(default=False)

    class Meta:
        db_table = "customer_consoles"
        constraints = [
            models.UniqueConstraint(
                fields=["customer", "console_type", "is_retro"], name="uniq_customer_console"
            ),
        ]


class CustomerShoppingCategory(models.Model):
    customer = models.ForeignKey(Customer, on_delete=models.CASCADE, related_name="shopping_categories")
    category = models.CharField(max_length=20)

    class Meta:
        db_table = "customer_shopping_categories"
        constraints = [
            models.UniqueConstraint(fields=["customer", "category"], name="uniq_customer_category"),
        ]

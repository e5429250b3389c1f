from django.apps import AppConfig


class PhoneVerificationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "app.phone_verifications"
    verbose_name = "Phone verifications"

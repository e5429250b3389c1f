from django.contrib import admin

from .models import PhoneVerification


@admin.register(PhoneVerification)
class PhoneVerificationAdmin(admin.ModelAdmin):
    list_display = ["id", "phone_number", "status", "attempts", "created_at", "expires_at", "verified_at"]
    list_filter = ["verified", "created_at", "expires_at"]
    search_fields = ["phone_number"]
    ordering = ["-created_at"]
    readonly_fields = ["otp_code", "created_at", "verified_at"]

    @admin.display(description="Status")
    def status(self, obj: PhoneVerification):
        return obj.status

from django.contrib import admin

from .models import Customer, CustomerConsole, CustomerGiftCard, CustomerShoppingCategory


class CustomerGiftCardInline(admin.TabularInline):
    model = CustomerGiftCard
    extra = 0
    readonly_fields = ["created_at", "updated_at"]


class CustomerConsoleInline(admin.TabularInline):
    model = CustomerConsole
    extra = 0


class CustomerShoppingCategoryInline(admin.TabularInline):
    model = CustomerShoppingCategory
    extra = 0


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ["id", "full_name", "whatsapp_number", "email", "is_minor", "phone_verified", "created_at"]
    list_filter = ["is_minor", "phone_verified", "created_at"]
    search_fields = ["full_name", "whatsapp_number", "email", "guardian_full_name"]
    ordering = ["-created_at"]
    readonly_fields = ["created_at", "terms_accepted_at"]
    inlines = [CustomerGiftCardInline, CustomerConsoleInline, CustomerShoppingCategoryInline]

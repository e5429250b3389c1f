# app/config/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("app.users.auth_urls")),
    path("api/users/", include("app.users.urls")),
    path("api/otp/", include("app.phone_verifications.urls")),
    path("api/customers/", include("app.customers.urls")),
    path("api/admin/", include("app.adminpanel.urls")),
]

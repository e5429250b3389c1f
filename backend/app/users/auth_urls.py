# app/users/auth_urls.py
from django.urls import path
from .views import AdminLoginView

urlpatterns = [
    path("login/", AdminLoginView.as_view(), name="admin-login"),
    path("login", AdminLoginView.as_view()),
]

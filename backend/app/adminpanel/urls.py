# app/adminpanel/urls.py
from django.urls import path
from .views import (
    CustomerDetailView,
    CustomerListView,
    GiftCardDetailView,
    SummaryView,
    VerificationListView,
)

urlpatterns = [
    path("customers/", CustomerListView.as_view(), name="adminpanel-customers"),
    path(
        "customers/<int:customer_id>/",
        CustomerDetailView.as_view(),
        name="adminpanel-customer-detail",
    ),
    path(
        "gift-cards/<int:gift_card_id>/",
        GiftCardDetailView.as_view(),
        name="adminpanel-gift-card-detail",
    ),
    path("verifications/", VerificationListView.as_view(), name="adminpanel-verifications"),
    path("summary/", SummaryView.as_view(), name="adminpanel-summary"),
]

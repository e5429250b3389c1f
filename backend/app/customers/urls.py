from django.urls import path
from .views import CustomerIntakeView

urlpatterns = [
    path("", CustomerIntakeView.as_view(), name="customer-intake"),
]

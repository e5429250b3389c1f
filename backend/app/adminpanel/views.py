# app/adminpanel/views.py
from django.db.models import Count, Q
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.utils.timesince import timesince
from rest_framework.views import APIView

from app.common.exceptions import ValidationError
from app.common.permissions import IsAdminRole
from app.common.responses import ok
from app.customers.models import Customer, CustomerConsole, CustomerGiftCard
from app.customers.serializers import (
    CustomerSerializer,
    CustomerUpdateSerializer,
    GiftCardSerializer,
    GiftCardUsernameSerializer,
)
from app.customers.services import set_gift_card_username, update_customer_contact
from app.phone_verifications.models import PhoneVerification
from app.phone_verifications.phone import normalize_phone

MAX_PAGE_SIZE = 200
NEW_BADGE_SECONDS = 60 * 60 * 24


def _recent_text(dt):
    if not dt:
        return "-"
    diff = timesince(dt, timezone.now()).split(",")[0]
    if diff.startswith("0"):
        return "just now"
    return f"{diff} ago"


def _page_params(request):
    try:
        limit = min(int(request.GET.get("limit", 50)), MAX_PAGE_SIZE)
        offset = max(int(request.GET.get("offset", 0)), 0)
    except ValueError:
        raise ValidationError("limit and offset must be integers")
    if limit <= 0:
        raise ValidationError("limit must be positive")
    return limit, offset


def _customer_queryset():
    return Customer.objects.prefetch_related("gift_cards", "consoles", "shopping_categories")


class CustomerListView(APIView):
    permission_classes = [IsAdminRole]

    def get(self, request):
        q = (request.GET.get("q") or "").strip()
        limit, offset = _page_params(request)

        customers = _customer_queryset().order_by("-created_at", "-id")
        if q:
            cond = Q(full_name__icontains=q) | Q(email__icontains=q.lower())
            digits = "".join(ch for ch in q if ch.isdigit())
            if digits:
                cond |= Q(whatsapp_number__contains=digits)
            customers = customers.filter(cond)

        total = customers.count()
        items = []
        now = timezone.now()
        for c in customers[offset : offset + limit]:
            row = CustomerSerializer(c).data
            row["recentText"] = _recent_text(c.created_at)
            row["isNew"] = (now - c.created_at).total_seconds() <= NEW_BADGE_SECONDS
            items.append(row)

        return ok({"total": total, "items": items, "q": q, "limit": limit, "offset": offset})


class CustomerDetailView(APIView):
    permission_classes = [IsAdminRole]

    def get(self, request, customer_id):
        customer = get_object_or_404(_customer_queryset(), id=customer_id)
        return ok(CustomerSerializer(customer).data)

    def patch(self, request, customer_id):
        customer = get_object_or_404(_customer_queryset(), id=customer_id)
        serializer = CustomerUpdateSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            raise ValidationError("Invalid customer data", fields=serializer.errors)

        customer = update_customer_contact(customer, serializer.validated_data)
        return ok(CustomerSerializer(customer).data)


class GiftCardDetailView(APIView):
    permission_classes = [IsAdminRole]

    def patch(self, request, gift_card_id):
        gift_card = get_object_or_404(CustomerGiftCard, id=gift_card_id)
        serializer = GiftCardUsernameSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError("Invalid username", fields=serializer.errors)

        gift_card = set_gift_card_username(gift_card, serializer.validated_data["username"])
        return ok(GiftCardSerializer(gift_card).data)


class VerificationListView(APIView):
    permission_classes = [IsAdminRole]

    def get(self, request):
        limit, offset = _page_params(request)
        qs = PhoneVerification.objects.order_by("-created_at", "-id")

        phone = (request.GET.get("phone") or "").strip()
        if phone:
            qs = qs.filter(phone_number=normalize_phone(phone))

        # otp_code 는 절대 내려주지 않는다
        items = [
            {
                "id": v.id,
                "phoneNumber": v.phone_number,
                "status": v.status,
                "attempts": v.attempts,
                "createdAt": v.created_at,
                "expiresAt": v.expires_at,
                "verifiedAt": v.verified_at,
            }
            for v in qs[offset : offset + limit]
        ]
        return ok({"total": qs.count(), "items": items})


class SummaryView(APIView):
    permission_classes = [IsAdminRole]

    def get(self, request):
        totals = Customer.objects.aggregate(
            customers=Count("id"),
            minors=Count("id", filter=Q(is_minor=True)),
            phoneVerified=Count("id", filter=Q(phone_verified=True)),
        )
        gift_cards = {
            row["gift_card_type"]: row["n"]
            for row in CustomerGiftCard.objects.values("gift_card_type").annotate(n=Count("id"))
        }
        consoles = {
            row["console_type"]: row["n"]
            for row in CustomerConsole.objects.filter(is_retro=False)
            .values("console_type")
            .annotate(n=Count("id"))
        }
        retro_consoles = {
            row["console_type"]: row["n"]
            for row in CustomerConsole.objects.filter(is_retro=True)
            .values("console_type")
            .annotate(n=Count("id"))
        }
        return ok(
            {
                **totals,
                "giftCards": gift_cards,
                "consoles": consoles,
                "retroConsoles": retro_consoles,
            }
        )

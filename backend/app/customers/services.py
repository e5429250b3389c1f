# app/customers/services.py
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction
from django.utils import timezone

from app.common.exceptions import DuplicateError, ValidationError
from app.phone_verifications.phone import mask_phone
from app.phone_verifications.services import is_phone_verified

from . import options
from .models import Customer, CustomerConsole, CustomerGiftCard, CustomerShoppingCategory

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGES = {
    "whatsapp_number": (
        "This WhatsApp number is already registered in our system. Please use a different "
        "number or contact support if you believe this is an error."
    ),
    "email": (
        "This email address is already registered in our system. Please use a different "
        "email or contact support if you believe this is an error."
    ),
}


def _raise_duplicate(field: str):
    raise DuplicateError(DUPLICATE_MESSAGES[field], field=field)


def check_unique_contact(*, whatsapp_number=None, email=None, exclude_id=None):
    qs = Customer.objects.all()
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    if whatsapp_number and qs.filter(whatsapp_number=whatsapp_number).exists():
        _raise_duplicate("whatsapp_number")
    if email and qs.filter(email=email).exists():
        _raise_duplicate("email")


def _duplicate_field_from(error: IntegrityError) -> str:
    message = str(error)
    if "email" in message:
        return "email"
    return "whatsapp_number"


def create_player_profile(data: dict, *, now=None) -> Customer:
    """
    CustomerIntakeSerializer.validated_data 를 받아 고객 + 하위 테이블을 한 트랜잭션으로 저장.
    """
    now = now or timezone.now()
    whatsapp_number = data["whatsappNumber"]
    email = data.get("email")
    buys_gift_cards = data.get("purchaseGiftCards") == "yes"

    check_unique_contact(whatsapp_number=whatsapp_number, email=email)

    categories = [options.CATEGORY_VIDEO_GAMES]
    if buys_gift_cards:
        categories.append(options.CATEGORY_GIFT_CARDS)

    try:
        with transaction.atomic():
            customer = Customer.objects.create(
                full_name=data["fullName"],
                date_of_birth=data["dob"],
                whatsapp_number=whatsapp_number,
                email=email,
                is_minor=data["isMinor"],
                guardian_full_name=data.get("guardianFullName"),
                guardian_date_of_birth=data.get("guardianDob"),
                guardian_whatsapp_number=data.get("guardianWhatsappNumber"),
                phone_verified=is_phone_verified(whatsapp_number),
                terms_accepted=data["acceptedTerms"],
                terms_accepted_at=now,
            )

            CustomerShoppingCategory.objects.bulk_create(
                [CustomerShoppingCategory(customer=customer, category=c) for c in categories]
            )

            if buys_gift_cards:
                usernames = data.get("giftCardUsernames") or {}
                CustomerGiftCard.objects.bulk_create(
                    [
                        CustomerGiftCard(
                            customer=customer,
                            gift_card_type=card_id,
                            username=(usernames.get(card_id) or "").lower() or None,
                        )
                        for card_id in dict.fromkeys(data.get("selectedGiftCards") or [])
                    ]
                )

            consoles = [
                CustomerConsole(customer=customer, console_type=c, is_retro=False)
                for c in dict.fromkeys(data.get("selectedConsoles") or [])
            ] + [
                CustomerConsole(customer=customer, console_type=c, is_retro=True)
                for c in dict.fromkeys(data.get("selectedRetroConsoles") or [])
            ]
            CustomerConsole.objects.bulk_create(consoles)
    except IntegrityError as e:
        # 동시 가입 등으로 사전 체크를 통과한 중복
        logger.warning("customer insert conflict phone=%s: %s", mask_phone(whatsapp_number), e)
        _raise_duplicate(_duplicate_field_from(e))

    logger.info(
        "customer created id=%s minor=%s gift_cards=%s consoles=%s",
        customer.id,
        customer.is_minor,
        buys_gift_cards,
        len(consoles),
    )
    return customer


def update_customer_contact(customer: Customer, data: dict) -> Customer:
    fields = {
        "fullName": "full_name",
        "email": "email",
        "whatsappNumber": "whatsapp_number",
    }
    check_unique_contact(
        whatsapp_number=data.get("whatsappNumber"),
        email=data.get("email"),
        exclude_id=customer.id,
    )

    update_fields = []
    for key, attr in fields.items():
        if key in data:
            setattr(customer, attr, data[key])
            update_fields.append(attr)

    if "whatsapp_number" in update_fields:
        customer.phone_verified = is_phone_verified(customer.whatsapp_number)
        update_fields.append("phone_verified")

    if update_fields:
        try:
            with transaction.atomic():
                customer.save(update_fields=update_fields)
        except IntegrityError as e:
            _raise_duplicate(_duplicate_field_from(e))
    return customer


def set_gift_card_username(gift_card: CustomerGiftCard, username) -> CustomerGiftCard:
    if username and gift_card.gift_card_type in options.EMAIL_USERNAME_GIFT_CARDS:
        try:
            validate_email(username)
        except DjangoValidationError:
            raise ValidationError("Amazon and Apple gift cards require a valid email address")

    gift_card.username = username
    gift_card.save(update_fields=["username", "updated_at"])
    return gift_card

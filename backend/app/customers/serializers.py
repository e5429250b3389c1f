# app/customers/serializers.py
import re
from datetime import date
from zoneinfo import ZoneInfo

from django.conf import settings
from django.core.validators import validate_email
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone
from rest_framework import serializers

from app.common.exceptions import ValidationError
from app.phone_verifications.phone import validate_phone

from . import options
from .models import Customer

MIN_BIRTH_DATE = date(1900, 1, 1)


def store_today() -> date:
    return timezone.now().astimezone(ZoneInfo(settings.STORE_TIME_ZONE)).date()


def age_on(birth_date: date, today: date) -> int:
    # 만 나이
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def format_full_name(name: str) -> str:
    """'mary-jane  o'neil' -> 'Mary-Jane  O'neil' (공백/하이픈은 그대로 둔다)"""
    parts = re.split(r"(\s+|-)", name or "")
    return "".join(
        part if not part or part == "-" or part.isspace() else part[:1].upper() + part[1:].lower()
        for part in parts
    )


def _check_birth_date(value: date, today: date, message: str):
    if value > today or value < MIN_BIRTH_DATE:
        raise serializers.ValidationError(message)


def _normalize_number(value: str) -> str:
    try:
        return validate_phone(value)
    except ValidationError as e:
        raise serializers.ValidationError(e.message)


def _is_email(value: str) -> bool:
    try:
        validate_email(value)
    except DjangoValidationError:
        return False
    return True


class CustomerIntakeSerializer(serializers.Serializer):
    fullName = serializers.CharField(
        min_length=options.NAME_MIN_LENGTH,
        max_length=options.NAME_MAX_LENGTH,
        error_messages={
            "min_length": "Name must be at least 2 characters",
            "max_length": "Name must be less than 80 characters",
        },
    )
    email = serializers.EmailField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=254,
        error_messages={"invalid": "Please enter a valid email address"},
    )
    dob = serializers.DateField()
    whatsappNumber = serializers.CharField(
        min_length=10,
        max_length=25,
        error_messages={
            "min_length": "WhatsApp number must include country code and be at least 10 characters",
            "max_length": "WhatsApp number must be less than 25 characters",
        },
    )
    purchaseGiftCards = serializers.ChoiceField(choices=["yes", "no"], required=False, default="no")
    selectedGiftCards = serializers.ListField(
        child=serializers.ChoiceField(choices=list(options.GIFT_CARD_OPTIONS)),
        required=False,
        default=list,
    )
    giftCardUsernames = serializers.DictField(
        child=serializers.CharField(
            max_length=options.GIFT_CARD_USERNAME_MAX_LENGTH,
            allow_blank=True,
            allow_null=True,
            error_messages={"max_length": "Username must be less than 40 characters"},
        ),
        required=False,
        default=dict,
    )
    selectedConsoles = serializers.ListField(
        child=serializers.ChoiceField(choices=list(options.CONSOLE_OPTIONS)),
        required=False,
        default=list,
    )
    selectedRetroConsoles = serializers.ListField(
        child=serializers.ChoiceField(choices=list(options.RETRO_CONSOLE_OPTIONS)),
        required=False,
        default=list,
    )
    guardianFullName = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    guardianDob = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    guardianWhatsappNumber = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=25
    )
    acceptedTerms = serializers.BooleanField()

    def validate_fullName(self, value):
        return format_full_name(value.strip())

    def validate_email(self, value):
        value = (value or "").strip().lower()
        return value or None

    def validate_dob(self, value):
        _check_birth_date(
            value,
            store_today(),
            "Please enter a valid date of birth (cannot be in the future or before 1900)",
        )
        return value

    def validate_whatsappNumber(self, value):
        return _normalize_number(value)

    def validate_guardianDob(self, value):
        if not value:
            return None
        try:
            parsed = date.fromisoformat(value.strip())
        except ValueError:
            raise serializers.ValidationError(
                "Please enter a valid parent/guardian date of birth (cannot be in the future or before 1900)"
            )
        _check_birth_date(
            parsed,
            store_today(),
            "Please enter a valid parent/guardian date of birth (cannot be in the future or before 1900)",
        )
        return parsed

    def validate_acceptedTerms(self, value):
        if value is not True:
            raise serializers.ValidationError("You must accept the terms and conditions")
        return value

    def validate(self, attrs):
        errors = {}
        today = store_today()

        # 기프트카드
        buys_gift_cards = attrs.get("purchaseGiftCards") == "yes"
        selected_cards = attrs.get("selectedGiftCards") or []
        usernames = {
            k: (v or "").strip() for k, v in (attrs.get("giftCardUsernames") or {}).items()
        }
        if buys_gift_cards and not selected_cards:
            errors["selectedGiftCards"] = ["Please select at least one gift card type"]
        if buys_gift_cards:
            for card_id in selected_cards:
                username = usernames.get(card_id)
                if username and card_id in options.EMAIL_USERNAME_GIFT_CARDS and not _is_email(username):
                    errors["giftCardUsernames"] = [
                        "If you provide usernames for gift cards, Amazon and Apple require valid "
                        "email addresses. You can leave usernames blank."
                    ]
                    break

        # 게임기 (video_games 는 항상 선택)
        if not attrs.get("selectedConsoles") and not attrs.get("selectedRetroConsoles"):
            errors["selectedConsoles"] = ["Please select at least one gaming system"]

        # 보호자 (18세 미만)
        is_minor = age_on(attrs["dob"], today) < options.ADULT_AGE
        guardian_name = (attrs.get("guardianFullName") or "").strip()
        guardian_dob = attrs.get("guardianDob")
        guardian_number = (attrs.get("guardianWhatsappNumber") or "").strip()

        if is_minor and not (
            len(guardian_name) >= options.NAME_MIN_LENGTH and guardian_dob and guardian_number
        ):
            errors["guardianFullName"] = [
                "Parent/Guardian information is required for customers under 18 years old"
            ]
        elif guardian_name and not (
            options.NAME_MIN_LENGTH <= len(guardian_name) <= options.NAME_MAX_LENGTH
        ):
            errors["guardianFullName"] = [
                "Parent/Guardian legal full name must be between 2 and 80 characters"
            ]

        if is_minor and guardian_dob and age_on(guardian_dob, today) < options.ADULT_AGE:
            errors["guardianDob"] = ["Parent/Guardian must be at least 18 years old"]

        if is_minor and guardian_number and "guardianWhatsappNumber" not in errors:
            try:
                guardian_number = _normalize_number(guardian_number)
            except serializers.ValidationError as e:
                errors["guardianWhatsappNumber"] = e.detail

        if errors:
            raise serializers.ValidationError(errors)

        attrs["giftCardUsernames"] = usernames
        attrs["isMinor"] = is_minor
        if is_minor:
            attrs["guardianFullName"] = format_full_name(guardian_name)
            attrs["guardianWhatsappNumber"] = guardian_number
        else:
            attrs["guardianFullName"] = None
            attrs["guardianDob"] = None
            attrs["guardianWhatsappNumber"] = None
        return attrs


class GiftCardSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    type = serializers.CharField(source="gift_card_type", read_only=True)
    name = serializers.SerializerMethodField()
    username = serializers.CharField(read_only=True)

    def get_name(self, obj):
        return options.GIFT_CARD_OPTIONS.get(obj.gift_card_type, obj.gift_card_type)


class CustomerSerializer(serializers.ModelSerializer):
    customerId = serializers.IntegerField(source="id", read_only=True)
    fullName = serializers.CharField(source="full_name", read_only=True)
    dateOfBirth = serializers.DateField(source="date_of_birth", read_only=True)
    whatsappNumber = serializers.CharField(source="whatsapp_number", read_only=True)
    isMinor = serializers.BooleanField(source="is_minor", read_only=True)
    guardianFullName = serializers.CharField(source="guardian_full_name", read_only=True)
    guardianDateOfBirth = serializers.DateField(source="guardian_date_of_birth", read_only=True)
    guardianWhatsappNumber = serializers.CharField(source="guardian_whatsapp_number", read_only=True)
    phoneVerified = serializers.BooleanField(source="phone_verified", read_only=True)
    termsAcceptedAt = serializers.DateTimeField(source="terms_accepted_at", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    age = serializers.SerializerMethodField()
    giftCards = GiftCardSerializer(source="gift_cards", many=True, read_only=True)
    consoles = serializers.SerializerMethodField()
    retroConsoles = serializers.SerializerMethodField()
    categories = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            "customerId",
            "fullName",
            "email",
            "dateOfBirth",
            "age",
            "whatsappNumber",
            "isMinor",
            "guardianFullName",
            "guardianDateOfBirth",
            "guardianWhatsappNumber",
            "phoneVerified",
            "termsAcceptedAt",
            "createdAt",
            "giftCards",
            "consoles",
            "retroConsoles",
            "categories",
        ]

    def get_age(self, obj: Customer):
        return age_on(obj.date_of_birth, store_today()) if obj.date_of_birth else None

    def get_consoles(self, obj: Customer):
        return [c.console_type for c in obj.consoles.all() if not c.is_retro]

    def get_retroConsoles(self, obj: Customer):
        return [c.console_type for c in obj.consoles.all() if c.is_retro]

    def get_categories(self, obj: Customer):
        return [c.category for c in obj.shopping_categories.all()]


class CustomerUpdateSerializer(serializers.Serializer):
    fullName = serializers.CharField(
        required=False, min_length=options.NAME_MIN_LENGTH, max_length=options.NAME_MAX_LENGTH
    )
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True, max_length=254)
    whatsappNumber = serializers.CharField(required=False, min_length=10, max_length=25)

    def validate_fullName(self, value):
        return format_full_name(value.strip())

    def validate_email(self, value):
        value = (value or "").strip().lower()
        return value or None

    def validate_whatsappNumber(self, value):
        return _normalize_number(value)


class GiftCardUsernameSerializer(serializers.Serializer):
    username = serializers.CharField(
        allow_blank=True, allow_null=True, max_length=options.GIFT_CARD_USERNAME_MAX_LENGTH
    )

    def validate_username(self, value):
        value = (value or "").strip().lower()
        return value or None

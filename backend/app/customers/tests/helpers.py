from datetime import date

from app.customers.serializers import store_today


def years_ago(years: int) -> str:
    today = store_today()
    return date(today.year - years, 1, 1).isoformat()


def intake_payload(**overrides):
    payload = {
        "fullName": "jane doe",
        "email": "Jane@Example.com",
        "dob": years_ago(30),
        "whatsappNumber": "+1 (246) 555-1234",
        "purchaseGiftCards": "no",
        "selectedGiftCards": [],
        "giftCardUsernames": {},
        "selectedConsoles": ["ps5"],
        "selectedRetroConsoles": [],
        "guardianFullName": "",
        "guardianDob": "",
        "guardianWhatsappNumber": "",
        "acceptedTerms": True,
    }
    payload.update(overrides)
    return payload


def minor_payload(**overrides):
    payload = intake_payload(
        dob=years_ago(12),
        guardianFullName="john doe",
        guardianDob=years_ago(40),
        guardianWhatsappNumber="1 246 555 9876",
    )
    payload.update(overrides)
    return payload

from datetime import date, timedelta

from django.test import SimpleTestCase

from app.customers.serializers import CustomerIntakeSerializer, age_on, format_full_name, store_today

from .helpers import intake_payload, minor_payload, years_ago


class FormatFullNameTests(SimpleTestCase):
    def test_capitalizes_words_and_hyphenated_parts(self):
        self.assertEqual(format_full_name("mary-jane  o'NEIL"), "Mary-Jane  O'neil")

    def test_empty(self):
        self.assertEqual(format_full_name(""), "")


class AgeOnTests(SimpleTestCase):
    def test_birthday_not_reached(self):
        self.assertEqual(age_on(date(2008, 6, 2), date(2026, 6, 1)), 17)

    def test_birthday_today(self):
        self.assertEqual(age_on(date(2008, 6, 1), date(2026, 6, 1)), 18)


class CustomerIntakeSerializerTests(SimpleTestCase):
    def _errors(self, payload):
        serializer = CustomerIntakeSerializer(data=payload)
        self.assertFalse(serializer.is_valid())
        return serializer.errors

    def test_adult_minimal(self):
        serializer = CustomerIntakeSerializer(data=intake_payload())
        self.assertTrue(serializer.is_valid(), serializer.errors)

        data = serializer.validated_data
        self.assertEqual(data["fullName"], "Jane Doe")
        self.assertEqual(data["email"], "jane@example.com")
        self.assertEqual(data["whatsappNumber"], "+12465551234")
        self.assertFalse(data["isMinor"])
        self.assertIsNone(data["guardianFullName"])
        self.assertIsNone(data["guardianDob"])

    def test_blank_email_is_none(self):
        serializer = CustomerIntakeSerializer(data=intake_payload(email=""))
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertIsNone(serializer.validated_data["email"])

    def test_invalid_email(self):
        self.assertIn("email", self._errors(intake_payload(email="not-an-email")))

    def test_name_length(self):
        self.assertIn("fullName", self._errors(intake_payload(fullName="J")))
        self.assertIn("fullName", self._errors(intake_payload(fullName="x" * 81)))

    def test_dob_in_future(self):
        future = (store_today() + timedelta(days=1)).isoformat()
        self.assertIn("dob", self._errors(intake_payload(dob=future)))

    def test_dob_before_1900(self):
        self.assertIn("dob", self._errors(intake_payload(dob="1899-12-31")))

    def test_short_whatsapp_number(self):
        self.assertIn("whatsappNumber", self._errors(intake_payload(whatsappNumber="+1246555")))

    def test_terms_required(self):
        self.assertIn("acceptedTerms", self._errors(intake_payload(acceptedTerms=False)))

    def test_console_required(self):
        errors = self._errors(intake_payload(selectedConsoles=[], selectedRetroConsoles=[]))
        self.assertIn("selectedConsoles", errors)

    def test_retro_console_alone_is_enough(self):
        serializer = CustomerIntakeSerializer(
            data=intake_payload(selectedConsoles=[], selectedRetroConsoles=["psp"])
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)

    def test_unknown_console(self):
        self.assertIn("selectedConsoles", self._errors(intake_payload(selectedConsoles=["dreamcast"])))

    def test_gift_cards_required_when_purchasing(self):
        errors = self._errors(intake_payload(purchaseGiftCards="yes", selectedGiftCards=[]))
        self.assertIn("selectedGiftCards", errors)

    def test_amazon_username_must_be_email(self):
        errors = self._errors(
            intake_payload(
                purchaseGiftCards="yes",
                selectedGiftCards=["amazon"],
                giftCardUsernames={"amazon": "jane"},
            )
        )
        self.assertIn("giftCardUsernames", errors)

    def test_blank_gift_card_usernames_allowed(self):
        serializer = CustomerIntakeSerializer(
            data=intake_payload(
                purchaseGiftCards="yes",
                selectedGiftCards=["amazon", "roblox"],
                giftCardUsernames={"amazon": "", "roblox": "  Builder99 "},
            )
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["giftCardUsernames"]["roblox"], "Builder99")

    def test_gift_card_username_too_long(self):
        errors = self._errors(
            intake_payload(
                purchaseGiftCards="yes",
                selectedGiftCards=["roblox"],
                giftCardUsernames={"roblox": "x" * 41},
            )
        )
        self.assertIn("giftCardUsernames", errors)

    def test_minor_with_guardian(self):
        serializer = CustomerIntakeSerializer(data=minor_payload())
        self.assertTrue(serializer.is_valid(), serializer.errors)

        data = serializer.validated_data
        self.assertTrue(data["isMinor"])
        self.assertEqual(data["guardianFullName"], "John Doe")
        self.assertEqual(data["guardianWhatsappNumber"], "+12465559876")
        self.assertEqual(data["guardianDob"].isoformat(), years_ago(40))

    def test_minor_without_guardian(self):
        errors = self._errors(intake_payload(dob=years_ago(12)))
        self.assertIn("guardianFullName", errors)

    def test_minor_guardian_missing_number(self):
        errors = self._errors(minor_payload(guardianWhatsappNumber=""))
        self.assertIn("guardianFullName", errors)

    def test_guardian_must_be_adult(self):
        errors = self._errors(minor_payload(guardianDob=years_ago(16)))
        self.assertIn("guardianDob", errors)

    def test_guardian_dob_format(self):
        errors = self._errors(minor_payload(guardianDob="01/02/1980"))
        self.assertIn("guardianDob", errors)

    def test_guardian_invalid_number(self):
        errors = self._errors(minor_payload(guardianWhatsappNumber="12"))
        self.assertIn("guardianWhatsappNumber", errors)

    def test_adult_guardian_fields_dropped(self):
        serializer = CustomerIntakeSerializer(
            data=intake_payload(guardianFullName="Someone", guardianDob=years_ago(50))
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertIsNone(serializer.validated_data["guardianFullName"])
        self.assertIsNone(serializer.validated_data["guardianDob"])

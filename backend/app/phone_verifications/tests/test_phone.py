from django.test import SimpleTestCase

from app.common.exceptions import ValidationError
from app.phone_verifications.phone import mask_phone, normalize_phone, validate_phone


class NormalizePhoneTests(SimpleTestCase):
    def test_strips_formatting(self):
        self.assertEqual(normalize_phone("+1 (246) 555-1234"), "+12465551234")

    def test_prepends_plus(self):
        self.assertEqual(normalize_phone("1-246-555-1234"), "+12465551234")

    def test_idempotent(self):
        once = normalize_phone("+1 (246) 555-1234")
        self.assertEqual(normalize_phone(once), once)

    def test_empty_input(self):
        self.assertEqual(normalize_phone(None), "+")


class ValidatePhoneTests(SimpleTestCase):
    def test_returns_normalized(self):
        self.assertEqual(validate_phone("1 246 555 1234"), "+12465551234")

    def test_missing(self):
        for value in (None, "", "   "):
            with self.assertRaises(ValidationError):
                validate_phone(value)

    def test_no_digits(self):
        with self.assertRaises(ValidationError):
            validate_phone("abc")

    def test_plus_in_the_middle(self):
        with self.assertRaises(ValidationError):
            validate_phone("1246+5551234")

    def test_too_long(self):
        with self.assertRaises(ValidationError):
            validate_phone("+1234567890123456")


class MaskPhoneTests(SimpleTestCase):
    def test_masks_middle_digits(self):
        self.assertEqual(mask_phone("+12465551234"), "+1246****234")

    def test_short_values(self):
        self.assertEqual(mask_phone("+123"), "***")
        self.assertEqual(mask_phone("+1234567"), "***")

    def test_shortest_masked_value_hides_a_digit(self):
        self.assertEqual(mask_phone("+12345678"), "+1234*678")

"""Unit tests for field-level encryption."""
import base64

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from storefront_security.config import ConfigurationError
from storefront_security.kernel.errors import AuthenticationError, FormatError
from storefront_security.security.encryption import (
    FieldCipher,
    FieldKeyRotation,
    decrypt_field,
    encrypt_field,
)

PASSPHRASE = "passphrase123"


def _flip_byte(component: str, index: int = 0) -> str:
    raw = bytearray(base64.b64decode(component))
    raw[index] ^= 0x01
    return base64.b64encode(bytes(raw)).decode()


class TestEncryptField:
    def test_token_has_three_base64_parts(self):
        token = encrypt_field("hello@example.com", PASSPHRASE)
        parts = token.split(":")
        assert len(parts) == 3
        salt, iv, ct = (base64.b64decode(p, validate=True) for p in parts)
        assert len(salt) == 16
        assert len(iv) == 12
        assert len(ct) == len("hello@example.com") + 16  # GCM tag appended

    def test_concrete_round_trip(self):
        token = encrypt_field("hello@example.com", PASSPHRASE)
        assert decrypt_field(token, PASSPHRASE) == "hello@example.com"

    def test_wrong_passphrase_raises_authentication_error(self):
        token = encrypt_field("hello@example.com", PASSPHRASE)
        with pytest.raises(AuthenticationError):
            decrypt_field(token, "wrong-pass")

    def test_two_encryptions_differ(self):
        t1 = encrypt_field("same", PASSPHRASE)
        t2 = encrypt_field("same", PASSPHRASE)
        assert t1 != t2
        assert t1.split(":")[0] != t2.split(":")[0]
        assert t1.split(":")[1] != t2.split(":")[1]

    def test_ciphertext_not_plaintext(self):
        token = encrypt_field("secret-address", PASSPHRASE)
        assert "secret-address" not in token

    def test_empty_plaintext_round_trips(self):
        assert decrypt_field(encrypt_field("", PASSPHRASE), PASSPHRASE) == ""

    def test_unicode_round_trips(self):
        value = "Zoë Müller, 東京"
        assert decrypt_field(encrypt_field(value, PASSPHRASE), PASSPHRASE) == value

    @pytest.mark.parametrize("passphrase", ["", None])
    def test_missing_passphrase_is_configuration_error(self, passphrase):
        with pytest.raises(ConfigurationError):
            encrypt_field("x", passphrase)


class TestDecryptField:
    @pytest.mark.parametrize("token", ["", "abc", "a:b", "a:b:c:d"])
    def test_wrong_part_count_is_format_error(self, token):
        with pytest.raises(FormatError):
            decrypt_field(token, PASSPHRASE)

    def test_invalid_base64_is_format_error(self):
        with pytest.raises(FormatError):
            decrypt_field("!!!:???:***", PASSPHRASE)

    def test_wrong_salt_length_is_format_error(self):
        salt, iv, ct = encrypt_field("x", PASSPHRASE).split(":")
        short_salt = base64.b64encode(b"short").decode()
        with pytest.raises(FormatError):
            decrypt_field(f"{short_salt}:{iv}:{ct}", PASSPHRASE)

    @pytest.mark.parametrize("index", [0, 5, -1])
    def test_tampered_ciphertext_detected(self, index):
        salt, iv, ct = encrypt_field("hello@example.com", PASSPHRASE).split(":")
        tampered = f"{salt}:{iv}:{_flip_byte(ct, index)}"
        with pytest.raises(AuthenticationError):
            decrypt_field(tampered, PASSPHRASE)

    def test_tampered_iv_detected(self):
        salt, iv, ct = encrypt_field("hello@example.com", PASSPHRASE).split(":")
        with pytest.raises(AuthenticationError):
            decrypt_field(f"{salt}:{_flip_byte(iv)}:{ct}", PASSPHRASE)

    def test_tampered_salt_detected(self):
        salt, iv, ct = encrypt_field("hello@example.com", PASSPHRASE).split(":")
        with pytest.raises(AuthenticationError):
            decrypt_field(f"{_flip_byte(salt)}:{iv}:{ct}", PASSPHRASE)

    def test_wrong_key_and_tamper_share_message(self):
        token = encrypt_field("x", PASSPHRASE)
        salt, iv, ct = token.split(":")
        with pytest.raises(AuthenticationError) as wrong_key:
            decrypt_field(token, "other")
        with pytest.raises(AuthenticationError) as tampered:
            decrypt_field(f"{salt}:{iv}:{_flip_byte(ct)}", PASSPHRASE)
        assert wrong_key.value.message == tampered.value.message

    def test_missing_passphrase_is_configuration_error(self):
        token = encrypt_field("x", PASSPHRASE)
        with pytest.raises(ConfigurationError):
            decrypt_field(token, "")


class TestFieldCipherProperties:
    @settings(max_examples=10, deadline=None)
    @given(plaintext=st.text(max_size=64), passphrase=st.text(min_size=1, max_size=32))
    def test_round_trip(self, plaintext, passphrase):
        assert decrypt_field(encrypt_field(plaintext, passphrase), passphrase) == plaintext

    @settings(max_examples=10, deadline=None)
    @given(
        plaintext=st.text(max_size=32),
        p1=st.text(min_size=1, max_size=16),
        p2=st.text(min_size=1, max_size=16),
    )
    def test_wrong_key_rejected(self, plaintext, p1, p2):
        if p1 == p2:
            return
        with pytest.raises(AuthenticationError):
            decrypt_field(encrypt_field(plaintext, p1), p2)


class TestFieldCipher:
    def test_round_trip(self):
        cipher = FieldCipher(PASSPHRASE)
        assert cipher.decrypt(cipher.encrypt("555-0100")) == "555-0100"

    def test_rejects_empty_passphrase_at_construction(self):
        with pytest.raises(ConfigurationError):
            FieldCipher("")

    def test_repr_hides_passphrase(self):
        assert PASSPHRASE not in repr(FieldCipher(PASSPHRASE))

    def test_encrypt_fields_skips_empty_values(self):
        cipher = FieldCipher(PASSPHRASE)
        encrypted = cipher.encrypt_fields({"first_name": "Ada", "phone": "", "city": None})
        assert encrypted["phone"] == ""
        assert encrypted["city"] is None
        assert encrypted["first_name"] != "Ada"
        assert cipher.decrypt_fields(encrypted) == {"first_name": "Ada", "phone": "", "city": None}

    def test_identical_fields_encrypt_differently(self):
        cipher = FieldCipher(PASSPHRASE)
        encrypted = cipher.encrypt_fields({"shipping_address": "1 Main St", "billing_address": "1 Main St"})
        assert encrypted["shipping_address"] != encrypted["billing_address"]


class TestFieldKeyRotation:
    def test_re_encrypt_produces_decryptable_output(self):
        old, new = FieldCipher("old-pass"), FieldCipher("new-pass")
        rotated = FieldKeyRotation.re_encrypt(old, new, old.encrypt("rotate me"))
        assert new.decrypt(rotated) == "rotate me"

    def test_old_passphrase_cannot_decrypt_rotated(self):
        old, new = FieldCipher("old-pass"), FieldCipher("new-pass")
        rotated = FieldKeyRotation.re_encrypt(old, new, old.encrypt("secret"))
        with pytest.raises(AuthenticationError):
            old.decrypt(rotated)

    def test_re_encrypt_fields(self):
        old, new = FieldCipher("old-pass"), FieldCipher("new-pass")
        record = old.encrypt_fields({"first_name": "Ada", "country": ""})
        rotated = FieldKeyRotation.re_encrypt_fields(old, new, record)
        assert new.decrypt_fields(rotated) == {"first_name": "Ada", "country": ""}

    def test_re_encrypt_with_wrong_old_key_raises(self):
        old, new = FieldCipher("old-pass"), FieldCipher("new-pass")
        with pytest.raises(AuthenticationError):
            FieldKeyRotation.re_encrypt(new, old, old.encrypt("x"))

"""Unit tests for password credential hashing."""
import base64

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from storefront_security.kernel.errors import FormatError
from storefront_security.kernel.security import PasswordCredential, PasswordHasher
from storefront_security.security.passwords import (
    Pbkdf2PasswordHasher,
    hash_password,
    verify_password,
)


class TestHashPassword:
    def test_returns_base64_salt_and_hash(self):
        cred = hash_password("secret1")
        assert isinstance(cred, PasswordCredential)
        assert len(cred.salt) > 10
        assert len(base64.b64decode(cred.salt, validate=True)) == 16
        assert len(base64.b64decode(cred.hash, validate=True)) == 32

    def test_hash_has_fixed_length(self):
        assert len(hash_password("a").hash) == len(hash_password("a much longer password").hash) == 44

    def test_same_password_gives_different_salt_and_hash(self):
        c1 = hash_password("same-password")
        c2 = hash_password("same-password")
        assert c1.salt != c2.salt
        assert c1.hash != c2.hash

    def test_repr_hides_hash(self):
        cred = hash_password("secret1")
        assert cred.hash not in repr(cred)


class TestVerifyPassword:
    def test_correct_password(self):
        cred = hash_password("secret1")
        assert verify_password("secret1", cred.salt, cred.hash) is True

    def test_wrong_password(self):
        cred = hash_password("secret1")
        assert verify_password("secret2", cred.salt, cred.hash) is False

    def test_salt_swap_fails(self):
        c1 = hash_password("secret1")
        c2 = hash_password("secret1")
        assert verify_password("secret1", c2.salt, c1.hash) is False

    def test_malformed_salt_returns_false(self):
        cred = hash_password("secret1")
        assert verify_password("secret1", "not base64!", cred.hash) is False

    def test_malformed_hash_returns_false(self):
        cred = hash_password("secret1")
        assert verify_password("secret1", cred.salt, "not base64!") is False

    def test_empty_salt_returns_false(self):
        cred = hash_password("secret1")
        assert verify_password("secret1", "", cred.hash) is False

    def test_truncated_hash_returns_false(self):
        cred = hash_password("secret1")
        truncated = base64.b64encode(base64.b64decode(cred.hash)[:16]).decode()
        assert verify_password("secret1", cred.salt, truncated) is False

    @pytest.mark.parametrize("salt,hash_", [(None, "aGFzaA=="), ("c2FsdA==", None)])
    def test_missing_stored_value_raises(self, salt, hash_):
        with pytest.raises(FormatError):
            verify_password("secret1", salt, hash_)

    @settings(max_examples=5, deadline=None)
    @given(password=st.text(max_size=32), other=st.text(max_size=32))
    def test_property_own_credential_verifies(self, password, other):
        cred = hash_password(password)
        assert verify_password(password, cred.salt, cred.hash)
        if other != password:
            assert not verify_password(other, cred.salt, cred.hash)


class TestPbkdf2PasswordHasher:
    def test_implements_port(self):
        assert isinstance(Pbkdf2PasswordHasher(), PasswordHasher)

    def test_hash_and_verify(self):
        hasher = Pbkdf2PasswordHasher()
        cred = hasher.hash("hunter2")
        assert hasher.verify("hunter2", cred)
        assert not hasher.verify("hunter3", cred)

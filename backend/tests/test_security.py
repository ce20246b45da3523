"""
Retro Board Backend — Credential Helper Tests
==============================================

What we test:
    ✅ Hashes are salted and never equal the plain password
    ✅ verify_password accepts the right password and rejects others
    ✅ Empty or foreign hashes read as a mismatch, not an exception
    ✅ Access tokens are hex strings of the configured length and unique
"""

import string

from retroapi.config import settings
from retroapi.security import generate_access_token, hash_password, verify_password


class TestPasswordHashing:

    def test_hash_is_not_plain_text(self):
        """Hash should be a bcrypt string, never the password itself."""
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self):
        """Salting should make two hashes of one password differ."""
        assert hash_password("secret123") != hash_password("secret123")

    def test_verify_accepts_correct_password(self):
        """The original password should verify against its hash."""
        hashed = hash_password("secret123")
        assert verify_password("secret123", hashed) is True

    def test_verify_rejects_wrong_password(self):
        """A different password should not verify."""
        hashed = hash_password("secret123")
        assert verify_password("secret124", hashed) is False

    def test_verify_empty_hash_is_mismatch(self):
        """An empty stored hash should read as a mismatch."""
        assert verify_password("secret123", "") is False

    def test_verify_unrecognized_hash_is_mismatch(self):
        """A non-bcrypt stored hash should read as a mismatch, not raise."""
        assert verify_password("secret123", "not-a-bcrypt-hash") is False


class TestAccessTokens:

    def test_token_is_hex_of_configured_length(self):
        """Token should be lowercase hex, two characters per random byte."""
        token = generate_access_token()
        assert len(token) == settings.access_token_bytes * 2
        assert set(token) <= set(string.hexdigits.lower())

    def test_tokens_are_unique(self):
        """Consecutive tokens should never repeat."""
        tokens = {generate_access_token() for _ in range(20)}
        assert len(tokens) == 20

"""
Tests for PIN hashing.
"""

import pytest

from inventory_backend.auth.pin import hash_pin


class TestHashPin:
    """Tests for hash_pin"""

    def test_known_digest(self):
        """SHA-256 of '1234', base64 encoded, matches digests stored by older clients."""
        assert hash_pin("1234") == "A6xnQhbz4Vx2HuGl4lXwZ5U2I8iziLRFnhP5eNfIRvQ="

    def test_is_stable(self):
        assert hash_pin("4321") == hash_pin("4321")

    def test_different_pins_differ(self):
        assert hash_pin("1234") != hash_pin("1235")
        assert hash_pin("0000") != hash_pin("00000")

    def test_digest_length(self):
        assert len(hash_pin("secret-password")) == 44

    def test_unicode_pin(self):
        assert hash_pin("pässwörd") != hash_pin("passwword")

    @pytest.mark.parametrize("bad", ["", None, 1234])
    def test_rejects_invalid_pin(self, bad):
        with pytest.raises(ValueError):
            hash_pin(bad)


"""
Unit tests for core.credentials module.
Tests credential creation, verification and malformed stored data.
"""
import pytest

from plevenlab.core.credentials import (
    HASH_LENGTH,
    SALT_LENGTH,
    Credential,
    create_credential,
    verify_credential,
)
from plevenlab.core.errors import CredentialError, ErrorKind


class TestCreateCredential:
    """Tests for deriving a credential from a password."""

    @pytest.mark.parametrize("password", ["a", "TestPassword123", "pässwörd ✓", " padded "])
    def test_lengths_are_fixed(self, password):
        credential = create_credential(password)
        assert len(credential.hash) == HASH_LENGTH == 64
        assert len(credential.salt) == SALT_LENGTH == 128

    def test_same_password_gets_different_salts(self):
        salts = {create_credential("same-password").salt for _ in range(5)}
        assert len(salts) == 5

    def test_same_password_gets_different_hashes(self):
        first = create_credential("same-password")
        second = create_credential("same-password")
        assert first.hash != second.hash

    @pytest.mark.parametrize("password", ["", "   ", "\t\n", None])
    def test_blank_or_missing_password_is_invalid_input(self, password):
        with pytest.raises(CredentialError) as exc_info:
            create_credential(password)
        assert exc_info.value.kind is ErrorKind.INVALID_INPUT

    def test_repr_hides_key_material(self):
        credential = create_credential("TestPassword123")
        assert credential.hash.hex() not in repr(credential)
        assert "64 bytes" in repr(credential)


class TestVerifyCredential:
    """Tests for checking a password against a stored credential."""

    def test_correct_password(self):
        credential = create_credential("TestPassword123")
        assert verify_credential("TestPassword123", credential) is True

    def test_incorrect_password(self):
        credential = create_credential("TestPassword123")
        assert verify_credential("WrongPassword456", credential) is False

    def test_whitespace_is_significant(self):
        credential = create_credential("secret")
        assert verify_credential("secret ", credential) is False

    def test_unicode_password(self):
        credential = create_credential("пароль-密码")
        assert verify_credential("пароль-密码", credential) is True

    def test_verification_is_repeatable(self):
        credential = create_credential("ConsistentPassword789")
        for _ in range(5):
            assert verify_credential("ConsistentPassword789", credential) is True

    def test_tampered_hash_does_not_match(self):
        credential = create_credential("TestPassword123")
        tampered = Credential(hash=credential.hash[:-1] + bytes([credential.hash[-1] ^ 0xFF]), salt=credential.salt)
        assert verify_credential("TestPassword123", tampered) is False

    @pytest.mark.parametrize("password", ["", "   ", None])
    def test_blank_password_is_invalid_input(self, password):
        credential = create_credential("TestPassword123")
        with pytest.raises(CredentialError) as exc_info:
            verify_credential(password, credential)
        assert exc_info.value.kind is ErrorKind.INVALID_INPUT

    def test_short_hash_is_malformed(self):
        credential = Credential(hash=bytes(63), salt=bytes(128))
        with pytest.raises(CredentialError) as exc_info:
            verify_credential("anything", credential)
        assert exc_info.value.kind is ErrorKind.MALFORMED_CREDENTIAL

    @pytest.mark.parametrize("salt_length", [0, 64, 127, 129])
    def test_wrong_salt_length_is_malformed(self, salt_length):
        credential = Credential(hash=bytes(64), salt=bytes(salt_length))
        with pytest.raises(CredentialError) as exc_info:
            verify_credential("anything", credential)
        assert exc_info.value.kind is ErrorKind.MALFORMED_CREDENTIAL

"""
Tests for ChecksumService.
"""

from unittest.mock import MagicMock

import pytest

from flexsum import (
    ChecksumService,
    HashAlgorithm,
    HashingFailedError,
    InvalidInputError,
    UnknownAlgorithmError,
    UnsupportedAlgorithmError,
)
from flexsum.core.interfaces.logger import ILogger
from flexsum.core.models.config import ChecksumConfig


class TestResolve:
    """Algorithm resolution for checksum use."""

    def test_default_algorithm_from_config(self):
        service = ChecksumService(ChecksumConfig(default_algorithm="sha256"))
        assert service.resolve() is HashAlgorithm.SHA256

    def test_resolves_name_any_case(self):
        assert ChecksumService().resolve("CRC32C") is HashAlgorithm.CRC32C

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownAlgorithmError) as exc_info:
            ChecksumService().resolve("crc-32")
        assert exc_info.value.context["name"] == "crc-32"

    @pytest.mark.parametrize("algorithm", ["md5", "MD5", HashAlgorithm.MD5])
    def test_md5_is_rejected(self, algorithm):
        with pytest.raises(UnsupportedAlgorithmError, match="MD5"):
            ChecksumService().resolve(algorithm)


class TestChecksum:
    """Checksum computation through the service."""

    def test_default_is_crc32(self):
        assert ChecksumService().checksum(b"123456789") == "cbf43926"

    def test_explicit_algorithm(self):
        digest = ChecksumService().checksum(b"", "sha256")
        assert digest == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_size_limit_rejects_before_computing(self, fake_backend):
        service = ChecksumService(ChecksumConfig(max_input_size=4), backend=fake_backend)

        with pytest.raises(InvalidInputError) as exc_info:
            service.checksum(b"12345")

        assert exc_info.value.context == {"size": 5, "limit": 4}
        assert fake_backend.calls == []

    def test_size_limit_is_inclusive(self, fake_backend):
        service = ChecksumService(ChecksumConfig(max_input_size=4), backend=fake_backend)
        assert service.checksum(b"1234") == "000000ff"

    def test_zero_limit_allows_empty_input(self):
        service = ChecksumService(ChecksumConfig(max_input_size=0))
        assert service.checksum(b"", "crc32c") == "00000000"

    def test_backend_failure_propagates(self, failing_backend):
        service = ChecksumService(backend=failing_backend)
        with pytest.raises(HashingFailedError, match="SHA1"):
            service.checksum(b"abc", HashAlgorithm.SHA1)


class TestVerify:
    """Verification against expected checksums."""

    def test_match(self):
        assert ChecksumService().verify(b"123456789", "cbf43926") is True

    def test_match_ignores_expected_case(self):
        assert ChecksumService().verify(b"123456789", "E3069283", "crc32c") is True

    def test_mismatch_logs_debug(self):
        logger = MagicMock(spec=ILogger)
        service = ChecksumService(logger=logger)

        assert service.verify(b"123456789", "00000000") is False
        assert any(
            "mismatch" in call.args[0] for call in logger.debug.call_args_list
        )


class TestNegotiate:
    """Capability negotiation from a preference list."""

    def test_first_supported_wins(self):
        service = ChecksumService()
        assert service.negotiate(["md5", "blake3", "SHA1", "crc32"]) is HashAlgorithm.SHA1

    def test_none_when_nothing_usable(self):
        assert ChecksumService().negotiate(["md5", "", "sha512"]) is None

    def test_empty_preferences(self):
        assert ChecksumService().negotiate([]) is None

"""Tests for urlshort.config — ShortenerConfig frozen dataclass."""

from pathlib import Path

import pytest

from urlshort.config import REDIRECT_STATUSES, ShortenerConfig, check_redirect_status
from urlshort.errors import ConfigurationError


class TestShortenerConfig:
    def test_defaults(self) -> None:
        cfg = ShortenerConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.mapping_file is None
        assert cfg.redirect_status == 303
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = ShortenerConfig(host="0.0.0.0", port=3000, mapping_file=Path("paths.yaml"))

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.mapping_file == Path("paths.yaml")

    def test_frozen(self) -> None:
        cfg = ShortenerConfig()

        with pytest.raises(AttributeError):
            cfg.port = 9000  # type: ignore[misc]


class TestCheckRedirectStatus:
    @pytest.mark.parametrize("status", sorted(REDIRECT_STATUSES))
    def test_redirect_codes_accepted(self, status: int) -> None:
        assert check_redirect_status(status) == status

    @pytest.mark.parametrize("status", [200, 300, 304, 404])
    def test_other_codes_rejected(self, status: int) -> None:
        with pytest.raises(ConfigurationError, match=str(status)):
            check_redirect_status(status)

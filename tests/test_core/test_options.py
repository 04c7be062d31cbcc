"""Tests for corsgate.options."""

import dataclasses

import pytest

from corsgate.exceptions import ConfigurationError
from corsgate.options import Options


class TestOptions:
    def test_sequences_become_tuples(self) -> None:
        opts = Options(allowed_origins=["http://a.com"], allowed_methods=["GET"])
        assert opts.allowed_origins == ("http://a.com",)
        assert opts.allowed_methods == ("GET",)
        assert opts.allowed_headers is None

    def test_frozen(self) -> None:
        opts = Options()
        with pytest.raises(dataclasses.FrozenInstanceError):
            opts.max_age = 10  # type: ignore[misc]

    def test_single_string_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="allowed_origins"):
            Options(allowed_origins="http://a.com")

    def test_non_string_entry_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Options(allowed_methods=["GET", 1])  # type: ignore[list-item]

    @pytest.mark.parametrize("max_age", ["10", 1.5, True])
    def test_max_age_must_be_int(self, max_age) -> None:
        with pytest.raises(ConfigurationError, match="max_age"):
            Options(max_age=max_age)

    def test_callables_checked(self) -> None:
        with pytest.raises(ConfigurationError, match="allow_origin_func"):
            Options(allow_origin_func="yes")  # type: ignore[arg-type]
        with pytest.raises(ConfigurationError, match="error_handler"):
            Options(error_handler=42)  # type: ignore[arg-type]

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Options(max_age="x")  # type: ignore[arg-type]

    def test_from_kwargs_rejects_unknown(self) -> None:
        with pytest.raises(ConfigurationError, match="allow_origins"):
            Options.from_kwargs(allow_origins=["*"])

    def test_permissive(self) -> None:
        opts = Options.permissive()
        assert opts.allowed_origins == ("*",)
        assert opts.allowed_headers == ("*",)
        assert opts.allowed_methods == ("HEAD", "GET", "POST", "PUT", "PATCH", "DELETE")
        assert opts.allow_credentials is False

    def test_permissive_overrides(self) -> None:
        assert Options.permissive(max_age=60).max_age == 60

    @pytest.mark.parametrize("header", [
        "X-Ŧoken",
        "X-A\r\nSet-Cookie: sid=1",
        "X Header",
        "",
    ])
    def test_exposed_headers_must_be_header_names(self, header: str) -> None:
        with pytest.raises(ConfigurationError, match="exposed_headers"):
            Options(exposed_headers=["X-Ok", header])

    @pytest.mark.parametrize("header", ["X-Ŧoken", "X-A\nX-B", "X:Header"])
    def test_allowed_headers_must_be_header_names(self, header: str) -> None:
        with pytest.raises(ConfigurationError, match="allowed_headers"):
            Options(allowed_headers=[header])

    def test_header_wildcard_accepted(self) -> None:
        assert Options(allowed_headers=["*"]).allowed_headers == ("*",)
        assert Options(exposed_headers=["X-Request-Id"]).exposed_headers == ("X-Request-Id",)

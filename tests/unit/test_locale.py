from starlette.requests import Request

from pagewright.utils.locale import parse_accept_language, resolve_locale
from conftest import build_scope


def _request(accept_language: str | None) -> Request:
    headers = {"accept-language": accept_language} if accept_language is not None else {}
    return Request(build_scope(headers=headers))


def test_parse_orders_by_quality() -> None:
    assert parse_accept_language("fr;q=0.5, de-AT, en;q=0.9, it;q=0") == ["de-at", "en", "fr"]


class TestResolveLocale:
    def test_exact_match(self) -> None:
        assert resolve_locale(_request("de-AT,de;q=0.9"), ["en", "de-AT"]) == "de-AT"

    def test_primary_language_match(self) -> None:
        assert resolve_locale(_request("de-CH"), ["en", "de"]) == "de"

    def test_falls_back_to_default(self) -> None:
        assert resolve_locale(_request("ja"), ["en", "de"], "en") == "en"
        assert resolve_locale(_request(None), ["en"], None) is None

    def test_no_supported_locales(self) -> None:
        assert resolve_locale(_request("de"), [], "fr") == "fr"

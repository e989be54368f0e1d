import pytest

from core.languages import (
    SUPPORTED_LANGUAGES,
    UnsupportedLanguageError,
    get_language,
    is_supported,
    language_for_taxonomy,
    language_label,
    list_supported_languages,
    resolve_candidates,
    supported_codes,
    taxonomy_code,
)


def test_registry_has_twenty_unique_languages() -> None:
    codes = supported_codes()
    assert len(codes) == 20
    assert len(set(codes)) == 20
    assert len({info.taxonomy for info in SUPPORTED_LANGUAGES}) == 20


def test_list_supported_languages_shape() -> None:
    entries = list_supported_languages()
    assert entries[0] == {"code": "eng", "label": "English"}
    assert {"code": "fil", "label": "Filipino"} in entries
    assert all(set(entry) == {"code", "label"} for entry in entries)


def test_taxonomy_codes() -> None:
    assert taxonomy_code("eng") == "en"
    assert taxonomy_code("fil") == "tl"
    assert taxonomy_code("nor") == "no"
    with pytest.raises(UnsupportedLanguageError):
        taxonomy_code("xxx")


def test_norwegian_aliases_map_back() -> None:
    for alias in ("no", "nb", "nn", "nob", "nno"):
        assert language_for_taxonomy(alias, ["eng", "nor"]) == "nor"
    assert get_language("nor").matches("nb")
    assert not get_language("dan").matches("nb")


def test_language_for_taxonomy_respects_candidates() -> None:
    assert language_for_taxonomy("fi", ["eng", "fin"]) == "fin"
    assert language_for_taxonomy("fi", ["eng", "tur"]) is None
    assert language_for_taxonomy("und", ["eng"]) is None
    assert language_for_taxonomy(None, ["eng"]) is None


def test_resolve_candidates_defaults_and_dedupes() -> None:
    assert resolve_candidates(None) == tuple(supported_codes())
    assert resolve_candidates([]) == tuple(supported_codes())
    assert resolve_candidates(["rus", " eng ", "rus", ""]) == ("rus", "eng")


def test_resolve_candidates_rejects_unknown_code() -> None:
    with pytest.raises(UnsupportedLanguageError) as exc:
        resolve_candidates(["eng", "klingon"])
    assert isinstance(exc.value, ValueError)


def test_labels() -> None:
    assert language_label("deu") == "German"
    assert language_label("zzz") == "zzz"
    assert language_label(None) == ""
    assert is_supported("kor")
    assert not is_supported("en")

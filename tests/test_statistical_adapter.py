import pytest

pytest.importorskip("langdetect")

from langdetect.lang_detect_exception import (  # type: ignore[import-untyped]
    ErrorCode,
    LangDetectException,
)

from core.lang_detect import (
    build_whitelist,
    classify_text,
    reset_classifier,
    statistically_classify,
)
from observability.metrics import CLASSIFIER_ERRORS
from tests.conftest import fixed_classifier

ENGLISH_TEXT = (
    "The quick brown fox jumps over the lazy dog while the farmer watches "
    "from the window of his old wooden house."
)


@pytest.fixture(autouse=True)
def _fresh_factory():
    reset_classifier()
    yield
    reset_classifier()


def test_build_whitelist_maps_and_dedupes() -> None:
    assert build_whitelist(["nor", "dan", "eng", "nor"]) == ("no", "da", "en")
    assert build_whitelist(["fil"]) == ("tl",)


def test_classifier_receives_whitelist_and_min_length() -> None:
    classify = fixed_classifier("en")
    assert statistically_classify(ENGLISH_TEXT, ["eng", "deu"], 20, classify) == "en"
    assert classify.calls == [(ENGLISH_TEXT, ("en", "de"), 20)]


def test_classifier_exception_is_undetermined() -> None:
    def boom(text, whitelist, min_length):
        raise LangDetectException(ErrorCode.CantDetectError, "No features in text.")

    before = CLASSIFIER_ERRORS._value.get()
    assert statistically_classify(ENGLISH_TEXT, ["eng"], 20, boom) == "und"
    assert CLASSIFIER_ERRORS._value.get() == pytest.approx(before + 1)


def test_unexpected_classifier_error_is_undetermined() -> None:
    def boom(text, whitelist, min_length):
        raise RuntimeError("profile missing")

    assert statistically_classify(ENGLISH_TEXT, ["eng"], 20, boom) == "und"


def test_answer_outside_candidates_is_undetermined() -> None:
    assert statistically_classify(ENGLISH_TEXT, ["eng"], 20, fixed_classifier("fr")) == "und"
    assert statistically_classify(ENGLISH_TEXT, ["eng"], 20, fixed_classifier("")) == "und"


def test_norwegian_alias_is_kept_as_taxonomy_code() -> None:
    result = statistically_classify(ENGLISH_TEXT, ["eng", "nor"], 20, fixed_classifier("nb"))
    assert result == "nb"


def test_langdetect_recognises_english() -> None:
    assert classify_text(ENGLISH_TEXT, ("en", "de", "fr"), 20) == "en"


def test_langdetect_whitelist_excludes_other_languages() -> None:
    german = "Der schnelle braune Fuchs springt über den faulen Hund im Garten."
    assert classify_text(german, ("en", "fr"), 20) in {"en", "fr"}


def test_langdetect_short_text_is_undetermined() -> None:
    assert classify_text("hi there", ("en",), 20) == "und"


def test_langdetect_unknown_whitelist_is_undetermined() -> None:
    assert classify_text(ENGLISH_TEXT, ("xx",), 20) == "und"


def test_reset_reloads_profiles() -> None:
    assert classify_text(ENGLISH_TEXT, ("en", "de"), 20) == "en"
    reset_classifier()
    assert classify_text(ENGLISH_TEXT, ("en", "de"), 20) == "en"

import pytest

from core.confusion import cascade, finnish
from observability.metrics import RESOLVER_OVERRIDES

FINNISH_TEXT = (
    "Minun perheeni asuu Helsingissä. Isäni on opettaja ja äitini on lääkäri. "
    "Talossa on kaksi kissaa."
)
MIXED_TURKISH_TEXT = "Bugün arkadaşımla çarşıya gideceğim ve yang adalah çok güzel."
DANISH_TEXT = (
    "Han bliver hjemme og siger at han tager bussen gennem byen uden sin hund, "
    "men det er ikke meget."
)


def test_resolver_order() -> None:
    assert cascade.RESOLVER_ORDER == ("scandinavian", "indonesian", "finnish", "turkish")
    assert set(cascade.RESOLVERS) == set(cascade.RESOLVER_ORDER)


@pytest.mark.parametrize("provisional", ["und", ""])
def test_undetermined_passes_through(provisional: str) -> None:
    assert cascade.run_cascade(FINNISH_TEXT, provisional, ("fin", "fil")) == provisional


def test_each_resolver_sees_previous_answer(monkeypatch) -> None:
    seen = []

    def fake(name, answer):
        def resolve(text, provisional, candidates):
            seen.append((name, provisional))
            return answer

        return resolve

    for name, answer in zip(cascade.RESOLVER_ORDER, ["a", "b", "c", "d"]):
        monkeypatch.setitem(cascade.RESOLVERS, name, fake(name, answer))

    assert cascade.run_cascade("text", "x", ("eng",)) == "d"
    assert seen == [
        ("scandinavian", "x"),
        ("indonesian", "a"),
        ("finnish", "b"),
        ("turkish", "c"),
    ]


def test_finnish_text_misread_as_filipino() -> None:
    assert cascade.run_cascade(FINNISH_TEXT, "tl", ("fin", "fil", "eng")) == "fi"


def test_turkish_text_with_indonesian_frames_stays_turkish() -> None:
    result = cascade.run_cascade(MIXED_TURKISH_TEXT, "tr", ("tur", "ind", "fin"))
    assert result == "tr"


def test_cascade_is_deterministic() -> None:
    candidates = ("tur", "ind", "fin", "fil")
    first = cascade.run_cascade(FINNISH_TEXT, "tr", candidates)
    second = cascade.run_cascade(FINNISH_TEXT, "tr", candidates)
    assert first == second


def test_override_is_counted() -> None:
    counter = RESOLVER_OVERRIDES.labels(resolver="scandinavian")
    before = counter._value.get()
    assert cascade.run_cascade(DANISH_TEXT, "sv", ("dan", "swe", "nor")) == "da"
    assert counter._value.get() == pytest.approx(before + 1)


def test_failing_resolver_keeps_answer(monkeypatch) -> None:
    def boom(text, provisional):
        raise RuntimeError("broken table")

    monkeypatch.setattr(finnish, "finnish_evidence", boom)
    assert cascade.run_cascade(FINNISH_TEXT, "tl", ("fin", "fil")) == "tl"


def test_turkish_with_finnish_looking_words_stays_turkish() -> None:
    text = (
        "Annesi bana çok güzel bir hediye aldı. Kardeşim şimdi okulda, yarın "
        "birlikte gittik dışarı ve çiçek aldık."
    )
    assert cascade.run_cascade(text, "tr", ("tur", "fin")) == "tr"


def test_indonesian_with_finnish_looking_suffixes_stays_indonesian() -> None:
    text = (
        "Buku ini adalah buku yang sangat bagus karena informasi yang ada di "
        "dalamnya sangat berguna bagi kita semua."
    )
    assert cascade.run_cascade(text, "id", ("ind", "fin")) == "id"

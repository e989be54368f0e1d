"""Linguistic marker tables for the confusion resolvers.

Every pattern is compiled case-sensitively and matched against lower-cased
text. Tables are shared: a resolver cross-checking a competitor reads that
competitor's table from here instead of keeping its own copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Pattern, Tuple

from core.confusion.signals import WeightedPattern, rx, weighted, words

# ---------------------------------------------------------------------------
# Scandinavian
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScandinavianMarkers:
    words: Tuple[WeightedPattern, ...]
    patterns: Tuple[WeightedPattern, ...]
    letters: Mapping[str, float]
    # Words practically absent from the two sibling languages.
    indicators: Tuple[Pattern[str], ...]
    indicator_bonus: bool = False


def _indicators(*tokens: str) -> Tuple[Pattern[str], ...]:
    return tuple(rx(words(token)) for token in tokens)


DANISH = ScandinavianMarkers(
    words=weighted(
        3.0,
        words(
            "bliver", "siger", "tager", "giver", "af", "gennem", "mellem", "mod",
            "uden", "bag", "hen", "ind", "op", "ud", "tilbage",
        ),
        words(
            "være", "været", "værende", "blev", "blevet", r"blev\s+det",
            r"blev\s+han", r"blev\s+hun", r"blev\s+de",
        ),
        words(
            "efter", "før", "frem", "blandt", "bort", "hos", "ved", "der", "til",
            "fra", "over", "under", "om", "for", "med",
        ),
        words("denne", "disse", r"denne\s+her", r"disse\s+her", r"det\s+her", r"den\s+her"),
        words(
            "ikke", "også", "meget", "mere", "mest", "så", "lige", r"lige\s+nu",
            r"lige\s+her", r"lige\s+der",
        ),
    )
    + weighted(
        2.5,
        words(
            "og", "er", "det", "at", "vil", "kan", "skal", "har", "var", "må",
            "får", "ser", "kommer", "går", "ligger", "står",
        ),
        words(
            "dansk", "danmark", "danske", "dansker", "danskere", "københavn",
            "aarhus", "odense", "jylland", "fyn", "sjælland",
        ),
        words(
            r"der\s+er", r"der\s+var", r"der\s+kommer", r"der\s+går",
            r"det\s+er", r"det\s+var", r"det\s+kommer", r"det\s+går",
        ),
        words(
            r"hvad\s+er", r"hvad\s+var", r"hvem\s+er", r"hvem\s+var",
            r"hvor\s+er", r"hvor\s+var", r"hvordan\s+er", r"hvordan\s+var",
        ),
    ),
    patterns=weighted(
        2.0,
        r"\w+ede\b",
        r"\w+et\s+blev\b",
        r"\w+er\s+blevet\b",
        r"\w+er\s+blev\b",
        r"\b\w+er\s+ikke\b",
        r"\b\w+er\s+også\b",
        r"\b\w+er\s+meget\b",
        r"\bdet\s+er\s+\w+\s+der\b",
        r"\b\w+\s+af\s+\w+\b",
        r"\b\w+\s+gennem\s+\w+\b",
    ),
    letters={"æ": 0.015, "ø": 0.015, "å": 0.004},
    indicators=_indicators(
        "bliver", "siger", "tager", "giver", "gennem", "mellem",
        "uden", "hen", "ind", "op", "ud", "af",
    ),
    indicator_bonus=True,
)

SWEDISH = ScandinavianMarkers(
    words=weighted(
        2.0,
        words(
            "blir", "säger", "tar", "ger", "ligger", "står", "kommer", "går",
            "vara", "varit", "varande", "av", "från", "efter", "före", "genom",
            "mellan", "mot", "utan", "hos", "bakom", "bland", "bort", "fram",
            "hem", "in", "ner", "upp", "ut", "tillbaka",
        ),
        words(
            "och", "är", "det", "att", "för", "med", "till", "den", "inte",
            "vill", "kan", "ska", "har", "var", "måste", "får", "ser", "vid",
            "om", "över", "under",
        ),
        words(
            "svensk", "sverige", "svenska", "svenskar", "svenskarna",
            "stockholm", "göteborg", "malmö",
        ),
        words(r"det\s+är", r"det\s+var", r"det\s+finns", r"det\s+fanns"),
    ),
    patterns=weighted(1.5, r"\w+ade\b", r"\w+et\s+blev\b"),
    letters={"ä": 0.012, "ö": 0.012, "å": 0.004},
    indicators=_indicators(
        "blir", "säger", "tar", "ger", "genom", "mellan", "utan", "bakom",
        "bland", "fram", "hem", "upp", "från", "är", "vara",
    ),
)

NORWEGIAN = ScandinavianMarkers(
    words=weighted(
        2.0,
        words(
            "blir", "sier", "tar", "gir", "ligger", "står", "kommer", "går",
            "være", "vært", "værende", "av", "fra", "etter", "før", "gjennom",
            "mellom", "mot", "uten", "hos", "bak", "blandt", "bort", "frem",
            "hjem", "inn", "ned", "opp", "ut", "tilbake",
        ),
        words(
            "og", "er", "det", "at", "for", "med", "til", "den", "ikke", "vil",
            "kan", "skal", "har", "var", "må", "får", "ser", "ved", "om",
            "over", "under",
        ),
        words(
            "norsk", "norge", "norske", "nordmenn", "nordmennene", "oslo",
            "bergen", "trondheim",
        ),
        words(r"det\s+er", r"det\s+var", r"det\s+finnes", r"det\s+fantes"),
    ),
    patterns=weighted(1.5, r"\w+et\b", r"\w+et\s+blev\b"),
    letters={"æ": 0.008, "ø": 0.012, "å": 0.005},
    indicators=_indicators(
        "blir", "sier", "tar", "gir", "gjennom", "mellom", "uten", "bak",
        "blandt", "frem", "hjem", "inn", "opp", "fra",
    ),
)

# ---------------------------------------------------------------------------
# Finnish
# ---------------------------------------------------------------------------

FINNISH_CORE_WORDS = (
    "olen", "olet", "on", "olemme", "olette", "ovat", "ei", "eivät",
    "minun", "sinun", "hänen", "meidän", "teidän", "heidän",
)

FINNISH_VOCABULARY = rx(
    words(
        *FINNISH_CORE_WORDS,
        "hei", "mitä", "mita", "kuuluu", "kirjoitan", "sinulle", "suomesta",
        "suomen", "suomessa", "talvi", "lunta", "talviloma", "kouluun", "koulu",
        "perheeni", "perhe", "lapin", "lappiin", "pohjoisosassa", "innoissani",
        "palaamme", "lomalta", "takaisin", "aloitan", "uuden", "kielen",
        "oppimisen", "halunnut", "oppia", "rakastan", "kulttuuria", "musiikki",
        "aion", "käydä", "tunneilla", "ystäväni", "ystäviä", "kirje",
        "ystävälle", "harrastukseni", "harrastus", "hevonen", "hevoseni",
        "pienestä", "asti",
    )
)

FINNISH_WORDS = (
    rx(words("minun", "sinun", "hänen", "meidän", "teidän", "heidän")),
    rx(words("olen", "olet", "on", "olemme", "olette", "ovat", "ei", "eivät", "eikä", "eikö")),
    rx(
        words(
            "ja", "tai", "mutta", "koska", "kun", "että", "jos", "vaikka",
            "sekä", "myös", "vielä", "nyt", "sitten",
        )
    ),
    rx(
        words(
            "onko", "eikö", "minä", "sinä", "hän", "me", "te", "he", "tämä",
            "tuo", "nämä", "nuo", "se", "ne",
        )
    ),
    rx(
        words(
            "huone", "huoneeni", "huoneesi", "huoneensa", "koti", "kotini",
            "kotiin", "kadulla", "kadulta", "kadulle", "talossa", "talosta",
            "taloon", "kirja", "kirjaa", "kirjan", "kirjassa", "kirjasta",
            "kirjaan", "auto", "autoa", "auton", "autossa", "autosta", "autoon",
            "ihminen", "ihmisen", "ihmisiä", "ihmisiin", "yö", "yötä", "yön",
            "päivä", "päivää", "päivän", "vuosi", "vuotta", "vuoden", "maa",
            "maata", "maan",
        )
    ),
    rx(
        words(
            "perhe", "perheeni", "perheesi", "perheensä", "isä", "isäni",
            "isäsi", "isänsä", "äiti", "äitini", "äitisi", "äitinsä", "sisko",
            "sisar", "sisareni", "sisaresi", "sisarensa", "veli", "veljeni",
            "veljesi", "veljensä", "harrastus", "harrastukset", "harrastuksia",
            "lääkäri", "opettaja", "soittaa", r"soittaa\s+kitaraa", "pelata",
            r"pelata\s+jalkapalloa", "rakastaa",
        )
    ),
    rx(
        words(
            "kirje", "ystävälle", "hei", "mitä", "kuuluu", "kirjoitan",
            "sinulle", "talvi", "lunta", "talviloma", "kouluun", "koulu",
            "lapin", "lappiin", "innoissani", "palaamme", "lomalta", "takaisin",
            "aloitan", "uuden", "kielen", "oppimisen", "halunnut", "oppia",
            "rakastan", "kulttuuria", "musiikki", "aion", "käydä", "tunneilla",
            "ystäväni", "lomalla", "siksi", "haluaa", "opetella", "kieltä",
            "paras", "täällä", "olleet", "ystäviä", "kaiken", "hetkellä", "emme",
            "mene", "menossa", "joka", "siitä", "erittäin",
        )
    ),
    rx(
        words(
            "menee", "tulee", "sanoo", "tekee", "näkee", "kuulee", "tietää",
            "osaa", "voi", "pitää", "tarvitsee", "sää", "kaunis",
        )
    ),
    rx(
        words(
            "kohti", "varten", "kanssa", "ilman", "vastaan", "yli", "ali",
            "keskellä", "vieressä", "takana", "edessä", "päällä", "alla",
            "sisällä", "ulkona",
        )
    ),
    rx(
        words(
            "hyvin", "paljon", "vähän", "usein", "harvoin", "aina", "koskaan",
            "joskus",
        )
    ),
    rx(
        words(
            "suomi", "suomen", "suomessa", "suomesta", "suomeen", "suomalainen",
            "suomalaiset", "helsinki", "helsingissä", "tampere", "turku", "oulu",
            "jyväskylä", "rovaniemi", "lappi", "lapissa",
        )
    ),
    rx(
        r"\b(?:minun\s+\w+ni|sinun\s+\w+si|hänen\s+\w+ns[aä]|meidän\s+\w+mme"
        r"|teidän\s+\w+nne|heidän\s+\w+ns[aä])\b"
    ),
    rx(r"\b\w+(?:ni|si|nsa|nsä|mme|nne)\b"),
)

FINNISH_PATTERNS = (
    rx(r"\w+(?:ssa|ssä|sta|stä|lla|llä|lta|ltä|na|nä|ksi|n|t|a|ä|i|in|en|on|un|yn)\b"),
    rx(r"\b\w*(?:kk|pp|tt|ss|nn|mm|ll|rr)\w+\b"),
    rx(r"\b\w+\s+on\s+\w+\b"),
    rx(r"\b\w+\s+ei\s+ole\b"),
    rx(r"\b\w+\s+onko\b"),
    rx(r"\b\w+\s+eikö\b"),
    rx(r"\bminun\s+\w+ni\b"),
    rx(r"\bsinun\s+\w+si\b"),
    rx(r"\bhänen\s+\w+ns[aä]\b"),
    rx(r"\bmitä\s+kuuluu\b"),
    rx(r"\bmiten\s+menee\b"),
    rx(r"\bkiitos\s+paljon\b"),
    rx(r"\bolen\s+\w+\b"),
    rx(r"\bolet\s+\w+\b"),
)

FINNISH_LETTERS = {"ä": 0.04, "ö": 0.01, "å": 0.0001}

FINNISH_DOUBLED = rx(r"\b\w*(?:kk|pp|tt|ss|nn|mm|ll|rr)\w+\b")
FINNISH_CASE_ENDINGS = rx(r"\w+(?:ssa|ssä|sta|stä|lla|llä|lta|ltä|na|nä|ksi)\b")
FINNISH_POSSESSIVES = rx(r"\w+(?:ni|si|nsa|nsä|mme|nne)\b")

# The three grammatical families whose co-occurrence marks Finnish.
FINNISH_FAMILIES = (FINNISH_CASE_ENDINGS, FINNISH_POSSESSIVES, FINNISH_DOUBLED)

# ---------------------------------------------------------------------------
# Turkish
# ---------------------------------------------------------------------------

TURKISH_WORDS = (
    rx(
        words(
            "ve", "ile", "için", "gibi", "göre", "kadar", "sonra", "önce",
            "doğru", "karşı", "daha", "en", "çok", "az", "biraz", "pek",
        )
    ),
    rx(words("ile", "için", "gibi", "göre", "kadar", "sonra", "önce", "doğru", "karşı")),
    rx(
        words(
            "ben", "sen", "o", "biz", "siz", "onlar", "bu", "şu", "bunlar",
            "şunlar", "benim", "senin", "onun", "bizim", "sizin", "onların",
        )
    ),
    rx(
        words(
            "var", "yok", "olmak", "etmek", "yapmak", "gitmek", "gelmek",
            "almak", "vermek", "görmek", "bilmek", "istemek", "sevmek",
        )
    ),
    rx(
        words(
            "bir", "iki", "üç", "dört", "beş", "altı", "yedi", "sekiz", "dokuz",
            "on", "evet", "hayır", "tamam", "iyi", "kötü", "güzel", "çirkin",
            "büyük", "küçük",
        )
    ),
    rx(
        words(
            "türk", "türkiye", "türkçe", "istanbul", "ankara", "izmir",
            "antalya", "bursa", "adana", "gaziantep", "konya", "kayseri", "mersin",
        )
    ),
    rx(
        words(
            "merhaba", "selam", "günaydın", r"iyi\s+akşamlar", r"iyi\s+geceler",
            r"teşekkür\s+ederim", r"rica\s+ederim", "lütfen", r"özür\s+dilerim",
        )
    ),
    rx(
        words(
            "doğum", "günü", "günüm", "sevgili", "hediye", "hediyeler",
            "bilgisayar", "kitap", "kitaplar", "sırt", "çanta", "portakal",
            "anneanne", "ziyaret", "plaj", "kuzen", "birlikte", "gidecek",
            "gideceğim", "geleceksin", "unutma", "mutlu", "mutluyum", "yaşında",
            "bugün", "yarın", "öğlen", "çiçek", "çikolata", "artık", "önemli",
            "çünkü", "nasılsın", r"ne\s+zaman", r"gelir\s+misin", "bana",
            "sürpriz",
        )
    ),
    rx(words("nasıl", "neden", "nerede", "kim", "ne", "hangi", "kaç", r"ne\s+var", r"ne\s+yok")),
)

TURKISH_PATTERNS = (
    rx(r"\w+(?:ler|lar|den|dan|de|da|e|a|i|ı|ü|u|in|ın|ün|un|im|ım|üm|um|iniz|ınız|ünüz|unuz)\b"),
    rx(r"\b\w+\s+ve\s+\w+\b"),
    rx(r"\b\w+\s+ile\s+\w+\b"),
    rx(r"\b\w+\s+için\s+\w+\b"),
    rx(r"\b\w+\s+gibi\s+\w+\b"),
    rx(r"\b\w+\s+var\b"),
    rx(r"\b\w+\s+yok\b"),
    rx(r"\b\w+\s+olmak\b"),
    rx(r"\b\w+\s+oldu\b"),
    rx(r"\b\w+\s+olacak\b"),
    rx(r"\w+(?:eceğim|acağım|edeceğim|eceksin|acaksın)\b"),
    rx(r"\b\w+\s+misin\b"),
    rx(r"\b\w+\s+de\s+\w+\b"),
    rx(r"\b\w+\s+ne\s+zaman\b"),
)

TURKISH_LETTERS = {"ı": 0.04, "ş": 0.02, "ğ": 0.01, "ü": 0.02, "ö": 0.01, "ç": 0.02}

# All Turkish diacritics, including the ö and ü Finnish and German share.
TURKISH_DIACRITICS = rx(r"[ışğüöç]")
# Letters Finnish never uses.
TURKISH_EXCLUSIVE = rx(r"[ışğçü]")

TURKISH_ENDINGS = rx(
    r"\w+(?:ler|lar|den|dan|de|da|e|a|i|ı|ü|u|in|ın|ün|un|im|ım|üm|um"
    r"|eceğim|edeceğim|gideceğim|geleceksin|yazmayı|unutma)\b"
)

TURKISH_KEY_WORDS = rx(
    words(
        "türk", "türkiye", "türkçe", "istanbul", "ankara", "izmir", "antalya",
        "bursa", "adana", "ve", "ile", "için", "gibi", "göre", "kadar", "var",
        "yok", "olmak",
    )
)

TURKISH_VOCABULARY = rx(
    words(
        "sevgili", "doğum", "günü", "günüm", "hediye", "bilgisayar",
        "anneanne", "ziyaret", "plaj", "kuzen", "mutlu", "yaşında",
        "yaşındayım", "bugün", "yarın", "öğlen", "çiçek", "çikolata", "lütfen",
        "gideceğim", "geleceksin", "yazmayı", "unutma", "artık", "önemli",
        "çünkü", "sürpriz", "adet", "almanca", "turuncu", "ablam", "abimden",
    )
)

# Broad vocabulary used by other resolvers to measure Turkish presence.
TURKISH_CROSS_CHECK_WORDS = rx(
    words(
        "türk", "türkiye", "türkçe", "istanbul", "ankara", "izmir", "ve",
        "ile", "için", "gibi", "göre", "kadar", "var", "yok", "olmak", "etmek",
        "yapmak", "gitmek", "gelmek", "sevgili", "doğum", "günü", "günüm",
        "hediye", "bilgisayar", "kitap", "anneanne", "ziyaret", "plaj", "kuzen",
        "mutlu", "mutluyum", "yaşında", "yaşındayım", "bugün", "yarın",
        "öğlen", "çiçek", "çikolata", "lütfen", "gideceğim", "geleceksin",
        "yazmayı", "unutma", "artık", "önemli", "çünkü", "sürpriz", "ben",
        "sen", "biz", "siz", "onlar", "bu", "şu", "nasılsın", "bana", "iki",
        "yeni", "birlikte",
    )
)

# ---------------------------------------------------------------------------
# Indonesian
# ---------------------------------------------------------------------------

INDONESIAN_FUNCTION_WORDS = rx(
    words(
        "dan", "atau", "dengan", "untuk", "dari", "ke", "di", "pada", "yang",
        "ini", "itu", "adalah", "akan", "sudah", "belum", "tidak", "bukan",
        "juga", "sangat", "sekali", "saja", "hanya", "masih", "lagi", "pun",
        "sih", "dong", "deh", "nih", "kok",
    )
)

INDONESIAN_WORDS = (
    INDONESIAN_FUNCTION_WORDS,
    rx(
        words(
            "saya", "aku", "kamu", "anda", "dia", "ia", "kami", "kita", "mereka",
            "mana", "siapa", "apa", "dimana", "kapan", "bagaimana", "mengapa",
        )
    ),
    rx(
        words(
            "ada", "mau", "ingin", "bisa", "boleh", "harus", "perlu", "mesti",
            "mampu", "dapat",
        )
    ),
    rx(
        words(
            "indonesia", "jakarta", "surabaya", "bandung", "medan", "semarang",
            "makassar", "palembang", "bogor", "malang", "yogyakarta", "padang",
            "denpasar", "manado", r"bandar\s+lampung",
        )
    ),
    rx(
        words(
            r"terima\s+kasih", r"sama\s+sama", "maaf", "permisi", "selamat",
            "pagi", "siang", "sore", "malam", "tinggal", "jumpa", "sampai",
            "ketemu",
        )
    ),
    rx(
        words(
            "surat", "hujan", "sang", "ibuku", "ayahku", "cinta", "langit",
            "bumi", "air", "tanah", "angin", "api", "matahari", "bulan",
            "bintang", "awan", "mendung", "petir", "salju", "kabut", "udara",
        )
    ),
)

INDONESIAN_SUFFIXES = rx(r"\w+(?:kan|an|i|nya|ku|mu|lah|kah|pun)\b")
INDONESIAN_YANG = rx(r"\b\w+\s+yang\s+\w+\b")
INDONESIAN_ADALAH = rx(r"\b\w+\s+adalah\s+\w+\b")

INDONESIAN_PATTERNS = (
    INDONESIAN_SUFFIXES,
    INDONESIAN_YANG,
    INDONESIAN_ADALAH,
    rx(r"\b\w+\s+untuk\s+\w+\b"),
    rx(r"\b\w+\s+dengan\s+\w+\b"),
    rx(r"\b\w+\s+dari\s+\w+\b"),
    rx(r"\b\w+\s+ke\s+\w+\b"),
    rx(r"\b\w+\s+di\s+\w+\b"),
    rx(r"\b\w+\s+pada\s+\w+\b"),
    rx(r"\bsurat\s+sang\s+\w+\b"),
    rx(r"\b\w+ku\s+\w+\b"),
    rx(r"\b\w+mu\s+\w+\b"),
    rx(r"\b\w+nya\s+\w+\b"),
)

# ---------------------------------------------------------------------------
# Filipino and Italian (only ever cross-checked)
# ---------------------------------------------------------------------------

FILIPINO_STRONG = (
    rx(r"\b(?:ang\s+\w+|ng\s+\w+|sa\s+\w+|ay\s+\w+|mga\s+\w+)\b"),
    rx(r"\b\w+\s+ay\s+\w+\b"),
    rx(r"\bang\s+\w+\s+ay\b"),
)

FILIPINO_INDICATORS = FILIPINO_STRONG + (
    rx(
        words(
            "ang", "ng", "sa", "ay", "mga", "si", "ni", "kay", "para", "kung",
            "kapag", "kasi", "dahil", "pero", "ngunit", "subalit",
        )
    ),
    rx(
        words(
            "pilipinas", "pilipino", "pilipina", "filipino", "filipina",
            "manila", "cebu", "davao", "quezon", "bayan", "tao", "bahay",
        )
    ),
    rx(r"\b\w+\s+na\s+\w+\b"),
    rx(r"\b\w+\s+ng\s+\w+\b"),
)

ITALIAN_INDICATORS = (
    rx(
        words(
            "e", "di", "a", "da", "in", "per", "con", "su", "tra", "fra", "del",
            "della", "dei", "delle", "il", "la", "lo", "gli", "le", "un", "una",
            "uno",
        )
    ),
    rx(words("italia", "italiano", "italiana", "roma", "milano", "napoli", "firenze", "venezia")),
    rx(r"\w+(?:zione|sione|mento|tore|trice)\b"),
)


__all__ = [
    "ScandinavianMarkers",
    "DANISH",
    "SWEDISH",
    "NORWEGIAN",
    "FINNISH_CORE_WORDS",
    "FINNISH_VOCABULARY",
    "FINNISH_WORDS",
    "FINNISH_PATTERNS",
    "FINNISH_LETTERS",
    "FINNISH_DOUBLED",
    "FINNISH_CASE_ENDINGS",
    "FINNISH_POSSESSIVES",
    "FINNISH_FAMILIES",
    "TURKISH_WORDS",
    "TURKISH_PATTERNS",
    "TURKISH_LETTERS",
    "TURKISH_DIACRITICS",
    "TURKISH_EXCLUSIVE",
    "TURKISH_ENDINGS",
    "TURKISH_KEY_WORDS",
    "TURKISH_VOCABULARY",
    "TURKISH_CROSS_CHECK_WORDS",
    "INDONESIAN_FUNCTION_WORDS",
    "INDONESIAN_WORDS",
    "INDONESIAN_SUFFIXES",
    "INDONESIAN_YANG",
    "INDONESIAN_ADALAH",
    "INDONESIAN_PATTERNS",
    "FILIPINO_STRONG",
    "FILIPINO_INDICATORS",
    "ITALIAN_INDICATORS",
]

import pytest

from juremy_push.errors import LanguageNotSupportedError
from juremy_push.languages import SUPPORTED_LANGUAGES, language_code, language_to_3char


@pytest.mark.parametrize("tag, expected", [
    ("en", "eng"),
    ("EN", "eng"),
    ("hu", "hun"),
    ("de-AT", "deu"),
    ("pt_BR", "por"),
    ("ga", "gle"),
])
def test_language_to_3char(tag, expected):
    assert language_to_3char(tag) == expected


def test_all_eu_languages_supported():
    assert len(SUPPORTED_LANGUAGES) == 24
    assert all(len(code) == 3 for code in SUPPORTED_LANGUAGES.values())


def test_language_code_strips_region():
    assert language_code("en-GB") == "en"
    assert language_code(" fr_CA ") == "fr"


def test_unsupported_language_names_the_code():
    with pytest.raises(LanguageNotSupportedError) as exc_info:
        language_to_3char("ja-JP")
    assert str(exc_info.value).endswith("ja")
    assert exc_info.value.detail == "ja"

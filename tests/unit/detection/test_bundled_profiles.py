"""
Detection against the profiles bundled with langdetect
"""

import pytest

from langsift.detection.base import DetectionStatus


@pytest.mark.parametrize(
    "text,expected",
    [
        ("The quick brown fox jumps over the lazy dog", "en"),
        ("Bonjour tout le monde, comment allez-vous aujourd'hui ?", "fr"),
        ("Der schnelle braune Fuchs springt über den faulen Hund", "de"),
        ("El rápido zorro marrón salta sobre el perro perezoso", "es"),
        ("Съешь же ещё этих мягких французских булок, да выпей чаю", "ru"),
        ("中华人民共和国是位于东亚的社会主义国家，首都是北京，人口众多，历史悠久。", "zh-cn"),
        ("これは日本語で書かれた文章です。ひらがなとカタカナが含まれています。", "ja"),
        ("대한민국은 동아시아에 위치한 나라입니다. 수도는 서울입니다.", "ko"),
    ],
)
def test_detects_common_languages(bundled_service, text, expected):
    assert bundled_service.detect(text) == expected


def test_results_are_reproducible(bundled_service):
    text = "Ceci est une phrase en français, assez courte."
    assert bundled_service.detect_all(text) == bundled_service.detect_all(text)


def test_symbol_only_text_has_no_evidence(bundled_service):
    outcome = bundled_service.classify("12345 !!! 3.14")
    assert outcome.status is DetectionStatus.NO_EVIDENCE


def test_embedded_latin_does_not_outweigh_script(bundled_service):
    assert bundled_service.detect("Привет мир, это тест OK") == "ru"

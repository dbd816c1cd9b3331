from script.fetch_start_words import extract_words


def test_extract_words_filters_and_dedupes():
    html = "<html><body><p>Silkworm and LISTEN</p><li>silkworm</li><li>scramble!</li></body></html>"
    assert extract_words(html, min_len=8, max_len=8) == ["silkworm", "scramble"]
    assert extract_words(html, min_len=3, max_len=6) == ["and", "listen"]

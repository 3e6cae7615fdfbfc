from gopl import charcount


def test_counts_and_invalid():
    result = charcount.count_chars(b"aab\xff")
    assert result.counts == {"a": 2, "b": 1}
    assert result.utflen[1] == 3
    assert result.invalid == 1


def test_multibyte_lengths():
    text = "aé世😀"
    result = charcount.count_chars(text.encode())
    assert result.utflen[1:] == [1, 1, 1, 1]
    assert sum(result.counts.values()) == len(text)


def test_truncated_sequence_is_invalid():
    data = "é".encode()[:1] + b"x"
    result = charcount.count_chars(data)
    assert result.invalid == 1
    assert result.counts == {"x": 1}


def test_report_format():
    report = charcount.format_report(charcount.count_chars(b"a\n\xff"))
    lines = report.splitlines()
    assert lines[:3] == ["rune\tcount", "'a'\t1", "'\\n'\t1"]
    assert lines[-1] == "1 invalid UTF-8 characters"
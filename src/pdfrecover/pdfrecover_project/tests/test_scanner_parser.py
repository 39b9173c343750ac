from pdfrecover.parser import HeaderParser, is_pdf_header, parse_leading_float, validate_offsets
from pdfrecover.scanner import iter_offsets, scan_footers, scan_headers

def test_offsets_in_order():
    data = b"xx%PDF-1.4yy%PDF-1.5zz"
    offsets = list(scan_headers(data))
    assert offsets == [2, 12], f"unexpected offsets: {offsets}"

def test_offset_at_start_of_buffer():
    assert list(scan_headers(b"%PDF-1.7 ...")) == [0]

def test_overlapping_matches_are_reported():
    # search resumes one byte after each hit
    assert list(iter_offsets(b"aaaa", b"aa")) == [0, 1, 2]

def test_no_marker_yields_nothing():
    assert list(scan_headers(b"\x00" * 4096)) == []
    assert list(iter_offsets(b"abc", b"")) == []

def test_scan_is_restartable():
    data = b"%%EOF %%EOF"
    gen = scan_footers(data, 0)
    first = list(gen)
    assert list(gen) == [], "a consumed generator stays exhausted"
    assert list(scan_footers(data, 0)) == first == [0, 6]
    assert list(scan_footers(data, 1)) == [6]

def test_parse_leading_float():
    assert parse_leading_float("1.4\n%") == 1.4
    assert parse_leading_float(" 1.7\r") == 1.7
    assert parse_leading_float("9\x00\x00") == 9.0
    assert parse_leading_float("abc") is None
    assert parse_leading_float("") is None

def test_decimal_version_is_accepted():
    assert is_pdf_header(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3", 0)
    assert is_pdf_header(b"junk%PDF-1.7\r\n", 4)

def test_integer_version_is_rejected():
    assert not is_pdf_header(b"%PDF-9\x00\x00\x00", 0)
    assert not is_pdf_header(b"%PDF-2.0\n", 0)

def test_unparsable_version_is_rejected():
    assert not is_pdf_header(b"%PDF-abc", 0)
    assert not is_pdf_header(b"%PDF-\xff\xfe\xfd", 0)

def test_truncated_window_at_end_of_dump():
    parsed = HeaderParser().parse(b"....%PDF-1", 4)
    assert parsed.raw == b"%PDF-1"
    assert parsed.version == 1.0
    assert not parsed.is_genuine

def test_window_is_eight_bytes():
    # the window stops before the second fractional digit
    parsed = HeaderParser().parse(b"%PDF-1.45", 0)
    assert parsed.raw == b"%PDF-1.4"
    assert parsed.version == 1.4

def test_validate_offsets_filters_false_positives():
    data = b"%PDF-1.4 ... %PDF-9xx ... %PDF-1.6"
    offsets = list(scan_headers(data))
    assert len(offsets) == 3
    kept = list(validate_offsets(data, offsets))
    assert kept == [offsets[0], offsets[2]], f"unexpected validated offsets: {kept}"

def test_non_ascii_digits_are_not_a_version():
    # Arabic-Indic digit one after the dot
    assert parse_leading_float(".١") is None
    assert parse_leading_float("١.٤") is None
    assert not is_pdf_header(b"%PDF-.\xd9\xa1\n", 0)

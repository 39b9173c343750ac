from pdfrecover.carver import Candidate, carve_candidates, split_segments

DOC = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<< /Root 1 0 R >>\n%%EOF"

def test_no_header_no_candidates():
    assert carve_candidates(b"RANDOMDATA" * 100) == []

def test_false_positive_header_no_candidates():
    assert carve_candidates(b"..%PDF-9..%%EOF..") == []

def test_header_without_eof_is_dropped():
    assert carve_candidates(b"junk" + DOC[:-5] + b"trailing") == []

def test_single_document():
    data = b"RANDOM" + DOC + b"TRAILER"
    cands = carve_candidates(data)
    assert len(cands) == 1, f"expected 1 candidate, got {len(cands)}"
    c = cands[0]
    assert c == Candidate(index=0, start=6, end=6 + len(DOC))
    assert c.slice(data) == DOC
    assert c.slice(data).endswith(b"%%EOF")
    assert c.size == len(DOC)

def test_incremental_update_gives_nested_candidates():
    update = b"\n2 0 obj\n<< >>\nendobj\ntrailer\n<< /Prev 0 >>\n%%EOF"
    data = b"\x00" * 16 + DOC + update + b"\x00" * 16
    cands = carve_candidates(data)
    assert [c.index for c in cands] == [0, 1]
    first, second = cands
    assert first.start == second.start == 16
    assert first.end < second.end
    assert second.slice(data).startswith(first.slice(data))
    assert first.slice(data) == DOC
    assert second.slice(data) == DOC + update

def test_two_documents_in_sequence():
    other = DOC.replace(b"%PDF-1.4", b"%PDF-1.7")
    data = b"AA" + DOC + b"BBBB" + other + b"CC"
    cands = carve_candidates(data)
    # the first header also reaches the second document's %%EOF
    assert [c.index for c in cands] == [0, 1, 2]
    a, spill, b = cands
    assert a.slice(data) == DOC
    assert spill.start == a.start and spill.end == b.end
    assert b.slice(data) == other
    assert a.end <= b.start, "independent documents must not overlap"

def test_candidates_grouped_by_header():
    other = DOC.replace(b"%PDF-1.4", b"%PDF-1.5")
    data = DOC + other
    cands = carve_candidates(data)
    starts = [c.start for c in cands]
    assert starts == [0, 0, len(DOC)], f"unexpected starts: {starts}"
    assert [c.index for c in cands] == [0, 1, 2]

def test_split_segments_ends_past_marker():
    data = b"%PDF-1.3 body %%EOF tail %%EOF"
    ends = list(split_segments(data, 0))
    assert ends == [19, len(data)]
    assert all(data[e - 5:e] == b"%%EOF" for e in ends)

def test_explicit_starts():
    data = b"%PDF-9 body %%EOF"
    # bypasses the header check entirely
    cands = carve_candidates(data, starts=[0])
    assert len(cands) == 1 and cands[0].end == len(data)

def test_carving_is_repeatable():
    data = b"x" + DOC + DOC + b"y"
    assert carve_candidates(data) == carve_candidates(data)

from wlkernel.wl.dictionary import LabelDictionary


def test_codes_start_at_one_in_first_seen_order():
    d = LabelDictionary()
    assert d.lookup_or_insert("x") == 1
    assert d.lookup_or_insert("y") == 2
    assert d.lookup_or_insert(("x", (1, 2))) == 3
    assert len(d) == 3


def test_same_signature_same_code():
    d = LabelDictionary()
    first = d.lookup_or_insert((0, (0, 0)))
    d.lookup_or_insert((0, (0,)))
    assert d.lookup_or_insert((0, (0, 0))) == first
    assert len(d) == 2


def test_lookup_without_insert():
    d = LabelDictionary()
    assert d.get("missing") is None
    assert "missing" not in d
    d.lookup_or_insert("present")
    assert d["present"] == 1
    assert "present" in d
    assert len(d) == 1


def test_instances_are_independent():
    d1, d2 = LabelDictionary(), LabelDictionary()
    d1.lookup_or_insert("a")
    d1.lookup_or_insert("b")
    assert d2.lookup_or_insert("b") == 1

from kwextract.hostmap import kw_delete, kw_has, kw_keys, kw_lookup, kw_size
from kwextract.utils import UNSPECIFIED


def test_dict():
    d = {"a": 1, "b": None}
    assert kw_has(d, "b")
    assert not kw_has(d, "c")
    assert kw_lookup(d, "a") == 1
    assert kw_lookup(d, "b") is None
    assert kw_lookup(d, "c") is UNSPECIFIED
    assert kw_size(d) == 2
    assert kw_keys(d) == ["a", "b"]
    assert kw_delete(d, "a") == 1
    assert kw_delete(d, "a") is UNSPECIFIED
    assert d == {"b": None}


def test_none():
    assert not kw_has(None, "a")
    assert kw_lookup(None, "a") is UNSPECIFIED
    assert kw_delete(None, "a") is UNSPECIFIED
    assert kw_size(None) == 0
    assert kw_keys(None) == []

from kwextract.utils import UNSPECIFIED, Named, list_str


def test_named():
    assert str(Named("TEST")) == "TEST"
    assert repr(UNSPECIFIED) == "UNSPECIFIED"


def test_unspecified_is_a_distinct_object():
    assert UNSPECIFIED is not None
    assert UNSPECIFIED != Named("UNSPECIFIED")
    assert UNSPECIFIED != None  # noqa: E711


def test_list_str():
    assert list_str(["a", "b"]) == "a, b"
    assert list_str([]) == ""
    assert list_str([1, 2], sep="/") == "1/2"

import pytest

from kwextract import KeywordSchema, SchemaError, set_options


def test_schema_basics():
    s = KeywordSchema(["a", "b"], ["c"])
    assert s.required == ("a", "b")
    assert s.optional == ("c",)
    assert not s.rest_allowed
    assert len(s) == 3
    assert list(s) == ["a", "b", "c"]
    assert s.names == ("a", "b", "c")
    assert "c" in s
    assert "d" not in s
    assert repr(s) == "KeywordSchema(a, b, c=?)"


def test_schema_eq_hash():
    s1 = KeywordSchema(["a"], ["b"], True)
    s2 = KeywordSchema(("a",), ("b",), True)
    s3 = KeywordSchema(["a"], ["b"], False)
    assert s1 == s2
    assert hash(s1) == hash(s2)
    assert s1 != s3
    assert len({s1, s2, s3}) == 2


def test_schema_immutable():
    s = KeywordSchema(["a"])
    with pytest.raises(AttributeError):
        s.rest_allowed = True


def test_schema_duplicate():
    with pytest.raises(SchemaError, match="Duplicate"):
        KeywordSchema(["a"], ["a"])


def test_schema_not_str():
    with pytest.raises(SchemaError, match="must be a str"):
        KeywordSchema(["a", 1])


def test_schema_str_instead_of_list():
    with pytest.raises(SchemaError):
        KeywordSchema("abc")


def test_schema_no_check():
    s = KeywordSchema(["a"], ["a"], check=False)
    assert len(s) == 2
    with set_options(check_schema=False):
        KeywordSchema(["a", "a"])


def test_from_table():
    table = ["a", "b", "c", "d"]
    s = KeywordSchema.from_table(table, 1, 2)
    assert s == KeywordSchema(["a"], ["b", "c"], False)


def test_from_table_rest():
    table = ["a", "b", "c"]
    s = KeywordSchema.from_table(table, 1, -3)
    assert s == KeywordSchema(["a"], ["b", "c"], True)

    s = KeywordSchema.from_table(table, 2, -1)
    assert s == KeywordSchema(["a", "b"], [], True)


def test_from_table_too_short():
    with pytest.raises(SchemaError):
        KeywordSchema.from_table(["a"], 1, 1)
    with pytest.raises(SchemaError):
        KeywordSchema.from_table(["a"], -1, 0)

from dataclasses import dataclass, field

import pytest

from primer.params import ParamError, unpack


@dataclass
class Query:
    words: list[str] = field(default_factory=list, metadata={"http": "w"})
    limit: int = 5
    verbose: bool = False
    name: str = ""
    ratio: float = 0.0


def test_unpack_sets_fields():
    q = Query()
    unpack("w=a&w=b&limit=7&verbose=true&name=x", q)
    assert q.words == ["a", "b"]
    assert q.limit == 7
    assert q.verbose is True
    assert q.name == "x"


def test_unknown_parameters_are_ignored():
    q = Query()
    unpack("zzz=1&words=oops", q)
    assert q == Query()


def test_mapping_input():
    q = Query()
    unpack({"w": ["one", "two"], "limit": ["-3"]}, q)
    assert q.words == ["one", "two"]
    assert q.limit == -3


def test_list_values_are_appended():
    q = Query(words=["x"])
    unpack("w=y", q)
    assert q.words == ["x", "y"]


def test_last_scalar_value_wins():
    q = Query()
    unpack("name=first&name=second", q)
    assert q.name == "second"


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_true_spellings(text):
    q = Query()
    unpack({"verbose": [text]}, q)
    assert q.verbose is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_false_spellings(text):
    q = Query(verbose=True)
    unpack({"verbose": [text]}, q)
    assert q.verbose is False


def test_bad_int():
    with pytest.raises(ParamError) as info:
        unpack("limit=lots", Query())
    assert str(info.value) == 'limit: strconv.ParseInt: parsing "lots": invalid syntax'


def test_bad_bool():
    with pytest.raises(ParamError, match=r'^verbose: strconv.ParseBool: parsing "123"'):
        unpack("verbose=123", Query())


def test_int_out_of_range():
    with pytest.raises(ParamError, match="out of range"):
        unpack("limit=9223372036854775808", Query())


def test_unsupported_kind():
    with pytest.raises(ParamError, match=r"^ratio: unsupported kind float$"):
        unpack("ratio=1", Query())


def test_bad_escape():
    with pytest.raises(ParamError, match="invalid URL escape"):
        unpack("name=%zz", Query())


def test_target_must_be_dataclass_instance():
    with pytest.raises(TypeError):
        unpack("name=x", Query)
import pytest

from letschat_relay.schemas import SchemaValidator


def test_letschat_schema_valid():
    sv = SchemaValidator()
    sample = {
        "system": "You are a friendly tutor.",
        "messages": [
            {"role": "user", "content": "What is photosynthesis?"},
            {"role": "assistant", "content": "A process plants use to make food."},
            {"role": "user", "content": "Explain it simply."},
        ],
    }
    assert sv.validate("letschat", sample) == []


def test_letschat_schema_is_presence_only():
    sv = SchemaValidator()
    # odd roles and non-string content are not inspected
    sample = {"system": "x", "messages": [{"role": "narrator", "content": 42}], "extra": True}
    assert sv.validate("letschat", sample) == []


@pytest.mark.parametrize("sample", [
    {},
    {"messages": [{"role": "user", "content": "hi"}]},
    {"system": None, "messages": [{"role": "user", "content": "hi"}]},
    {"system": "", "messages": [{"role": "user", "content": "hi"}]},
    {"system": "be nice"},
    {"system": "be nice", "messages": None},
    {"system": "be nice", "messages": []},
    {"system": False, "messages": {}},
    [],
    "system",
    None,
])
def test_letschat_schema_rejects_missing_or_empty(sample):
    assert SchemaValidator().validate("letschat", sample) != []


def test_unknown_schema():
    with pytest.raises(KeyError):
        SchemaValidator().validate("dataset", {})

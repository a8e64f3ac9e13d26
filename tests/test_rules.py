import pytest

from tweetapi.rules import (
    StreamAddRule,
    StreamDeleteRule,
    StreamRuleChange,
    StreamRuleData,
    StreamRules,
)


def test_validate_requires_add_or_delete():
    with pytest.raises(ValueError, match="there must be add or delete rules"):
        StreamRuleChange().validate()


def test_validate_requires_add_value():
    change = StreamRuleChange(add=[StreamAddRule(value="")])
    with pytest.raises(ValueError, match="add value is required"):
        change.validate()


def test_validate_requires_delete_ids():
    change = StreamRuleChange(delete=StreamDeleteRule(ids=[]))
    with pytest.raises(ValueError, match="delete ids are required"):
        change.validate()


def test_to_dict_omits_empty_parts():
    change = StreamRuleChange(add=[StreamAddRule(value="cats"), StreamAddRule(value="dogs", tag="pets")])
    change.validate()
    assert change.to_dict() == {"add": [{"value": "cats"}, {"value": "dogs", "tag": "pets"}]}


def test_to_dict_with_delete_only():
    change = StreamRuleChange(delete=StreamDeleteRule(ids=["1", "2"]))
    change.validate()
    assert change.to_dict() == {"delete": {"ids": ["1", "2"]}}


def test_rules_from_dict():
    rules = StreamRules.from_dict(
        {
            "data": [{"id": "1", "value": "cats", "tag": "pets"}],
            "meta": {
                "sent": "2021-01-01T00:00:00Z",
                "summary": {"created": 1, "not_created": 0, "deleted": 2, "not_deleted": 3},
            },
        }
    )
    assert rules.data == [StreamRuleData(id="1", value="cats", tag="pets")]
    assert rules.meta.sent == "2021-01-01T00:00:00Z"
    assert rules.meta.summary.created == 1
    assert rules.meta.summary.deleted == 2
    assert rules.meta.summary.not_deleted == 3


def test_rules_from_empty_dict():
    rules = StreamRules.from_dict({})
    assert rules.data == []
    assert rules.meta.summary.created == 0


def test_rules_from_dict_rejects_bad_data():
    with pytest.raises(TypeError):
        StreamRules.from_dict({"data": "nope"})
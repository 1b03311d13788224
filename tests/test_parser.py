import pytest

from ruriko.approvals.parser import Decision, NotADecisionError, parse_decision


def test_approve():
    d = parse_decision("approve abc123")
    assert d.approve is True
    assert d.approval_id == "abc123"
    assert d.reason == ""


def test_approve_with_reason():
    d = parse_decision("approve abc123 looks good to me")
    assert d.reason == "looks good to me"


def test_deny_with_quoted_reason():
    d = parse_decision('deny abc123 reason="too risky"')
    assert d == Decision(approve=False, approval_id="abc123", reason="too risky")


def test_deny_plain_reason():
    d = parse_decision("deny abc123 not authorised")
    assert d.reason == "not authorised"


def test_deny_unquoted_reason_form():
    d = parse_decision("deny abc123 REASON=nope")
    assert d.reason == "nope"


def test_deny_no_reason():
    with pytest.raises(ValueError, match="deny requires a reason"):
        parse_decision("deny abc123")


def test_deny_empty_quoted_reason():
    with pytest.raises(ValueError, match="deny requires a reason"):
        parse_decision('deny abc123 reason=""')


def test_not_a_decision():
    with pytest.raises(NotADecisionError):
        parse_decision("hello world")


def test_verb_prefix_without_space_is_not_a_decision():
    with pytest.raises(NotADecisionError):
        parse_decision("approved abc123")


def test_case_insensitive():
    d = parse_decision("Approve ABC123")
    assert d.approve is True
    assert d.approval_id == "ABC123"


def test_surrounding_whitespace():
    d = parse_decision("   DENY  x1   because  ")
    assert d.approve is False
    assert d.approval_id == "x1"
    assert d.reason == "because"


def test_missing_id():
    with pytest.raises(ValueError, match="usage: approve") as info:
        parse_decision("approve")
    assert not isinstance(info.value, NotADecisionError)


def test_deny_missing_id():
    with pytest.raises(ValueError, match="usage: deny"):
        parse_decision("deny")
import pytest

from ruriko.commands.guardrail import looks_like_secret


@pytest.mark.parametrize("sample", [
    "sk-" + "a1" * 12,
    "sk-proj-" + "b_" * 12,
    "sk-ant-" + "c-" * 12,
    "AKIA" + "Q" * 16,
    "ghp_" + "x" * 36,
    "gho_" + "y" * 40,
    "github_pat_" + "z" * 22,
    "xoxb-" + "1" * 10,
    "sk_live_" + "d" * 20,
    "pk_test_" + "e" * 24,
])
@pytest.mark.parametrize("is_command", [True, False])
def test_named_patterns_detected_in_any_message(sample, is_command):
    assert looks_like_secret(f"here it is: {sample} thanks", is_command) is True


def test_plain_prose_is_not_a_secret():
    assert looks_like_secret("hello there, how is the agent doing?", False) is False


def test_short_vendor_prefix_is_not_enough():
    assert looks_like_secret("AKIA" + "Q" * 15, True) is False
    assert looks_like_secret("sk-" + "a" * 19, True) is False


def test_prefix_inside_a_word_does_not_match():
    assert looks_like_secret("task-" + "a" * 25, True) is False


def test_long_base64_only_flagged_outside_commands():
    blob = "QUJD" * 12
    assert looks_like_secret(blob, False) is True
    assert looks_like_secret(f"/ruriko gosuto set a --content {blob}", True) is False


def test_sha1_length_hex_not_flagged():
    assert looks_like_secret("a" * 40, False) is False


def test_sha256_length_hex_flagged():
    assert looks_like_secret("0f" * 32, False) is True


def test_boundary_at_48_characters():
    assert looks_like_secret("A" * 47, False) is False
    assert looks_like_secret("A" * 48, False) is True
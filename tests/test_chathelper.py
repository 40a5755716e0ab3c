from lanmsg.chathelper import (
    Smiley,
    decode_smileys,
    encode_smileys,
    make_html_safe,
    replace_smiley,
)

ESCAPES = [("&", "&amp;"), ("<", "&lt;"), (">", "&gt;")]
SMILEYS = [
    Smiley(":)", ":/smileys/01"),
    Smiley(":D", ":/smileys/02"),
    Smiley(">:(", ":/smileys/03"),
]


def test_make_html_safe_applies_escapes():
    assert make_html_safe("a<b>&c", ESCAPES) == "a&lt;b&gt;&amp;c"
    assert make_html_safe("plain", ESCAPES) == "plain"
    assert make_html_safe("<x>", ()) == "<x>"


def test_replace_smiley_matches_exact_tag():
    assert replace_smiley('<img src="qrc:/smileys/01">', SMILEYS, ESCAPES) == ":)"
    assert replace_smiley('<img src="qrc:/smileys/03">', SMILEYS, ESCAPES) == "&gt;:("


def test_replace_smiley_unknown_is_none():
    assert replace_smiley('<img src="qrc:/smileys/99">', SMILEYS, ESCAPES) is None
    assert replace_smiley('<img src=":/smileys/01">', SMILEYS, ESCAPES) is None


def test_encode_smileys_replaces_images():
    message = 'hi <img src=":/smileys/01" /> and <img src=":/smileys/03" />'
    assert encode_smileys(message, SMILEYS, ESCAPES) == "hi :) and &gt;:("


def test_encode_leaves_other_images():
    message = '<img src=":/other" />'
    assert encode_smileys(message, SMILEYS, ESCAPES) == message


def test_decode_smileys_is_case_insensitive():
    result = decode_smileys("wow :d", SMILEYS, ESCAPES)
    assert result == "wow <img src='qrc:/smileys/02' />"


def test_decode_uses_escaped_codes():
    result = decode_smileys("angry &gt;:(", SMILEYS, ESCAPES)
    assert "<img src='qrc:/smileys/03' />" in result
    assert "&gt;" not in result


def test_encode_then_decode_restores_images():
    message = 'x <img src=":/smileys/01" /> y'
    decoded = decode_smileys(encode_smileys(message, SMILEYS, ESCAPES), SMILEYS, ESCAPES)
    assert decoded == "x <img src='qrc:/smileys/01' /> y"
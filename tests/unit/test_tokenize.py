from __future__ import annotations

from arffload._tokenize import iter_quoted, next_quoted


def test_quoted_token_containing_delimiter():
    assert list(iter_quoted("'a,b',c", ",")) == ["a,b", "c"]


def test_plain_tokens():
    assert list(iter_quoted("plain,text", ",")) == ["plain", "text"]


def test_empty_fragments_are_skipped():
    assert list(iter_quoted(",,a,,b,", ",")) == ["a", "b"]
    assert list(iter_quoted("", ",")) == []


def test_self_contained_quoted_token():
    assert list(iter_quoted("'abc' x", " ")) == ["abc", "x"]
    assert list(iter_quoted("''", ",")) == [""]


def test_quote_spanning_several_fragments_keeps_empty_parts():
    assert list(iter_quoted("'a,,b',c", ",")) == ["a,,b", "c"]
    assert list(iter_quoted("'my big relation'", " ")) == ["my big relation"]


def test_lone_quote_does_not_underflow():
    # "'" opens an empty quoted body, closed by the next quote-ending fragment
    assert list(iter_quoted("',b'", ",")) == [",b"]
    assert list(iter_quoted("','", ",")) == [","]


def test_unterminated_quote_ends_the_stream():
    assert list(iter_quoted("a,'b,c", ",")) == ["a"]
    assert list(iter_quoted("'", ",")) == []


def test_next_quoted_consumes_only_one_token():
    fragments = iter("@attribute 'my attr' real".split(" "))
    assert next_quoted(fragments, " ") == "@attribute"
    assert next_quoted(fragments, " ") == "my attr"
    assert list(fragments) == ["real"]
    assert next_quoted(iter([]), ",") is None


def test_quote_inside_unquoted_token_is_literal():
    assert list(iter_quoted("it's,fine", ",")) == ["it's", "fine"]

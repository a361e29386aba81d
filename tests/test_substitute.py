"""
Marker scanning and substitution, with stub resolvers.
"""

import re

import pytest

from randquote import QuoteNotFoundError, RandQuoteCfg, substitute_quotes
from randquote.config import compile_anchor


def _boom(filename: str) -> str:
    raise AssertionError(f"resolver must not be called (got {filename!r})")


@pytest.mark.parametrize("body", [
    "",
    "plain text",
    "<!-- not a quote -->",
    "<!--quote()-->",
    "<!--quote(has space)-->",
    "quote(fortunes)",
])
def test_no_markers_is_identity(body):
    assert substitute_quotes(body, [], RandQuoteCfg(), _boom) == body


def test_none_body_is_noop():
    assert substitute_quotes(None, [], RandQuoteCfg(), _boom) is None


def test_single_marker_keeps_surroundings():
    out = substitute_quotes("before <!--quote(fortunes)-->after", [], RandQuoteCfg(), lambda f: "A")
    assert out == "before Aafter"


def test_marker_with_inner_whitespace_and_path():
    calls = []

    def resolve(filename):
        calls.append(filename)
        return "Q"

    out = substitute_quotes("x <!--  quote(dir/sub/f.txt)   --> y", [], RandQuoteCfg(), resolve)
    assert out == "x Q y"
    assert calls == ["dir/sub/f.txt"]


def test_all_markers_are_replaced_independently():
    answers = iter(["first", "second", "third"])
    calls = []

    def resolve(filename):
        calls.append(filename)
        return next(answers)

    body = "<!--quote(a)-->|<!--quote(b)-->|<!--quote(a)-->"
    out = substitute_quotes(body, [], RandQuoteCfg(), resolve)
    assert out == "first|second|third"
    assert calls == ["a", "b", "a"]


def test_failure_is_reported_inline_and_scanning_continues():
    def resolve(filename):
        if filename == "missing":
            raise QuoteNotFoundError(filename, "No such file or directory")
        return "ok"

    body = "<!--quote(missing)--> then <!--quote(good)-->"
    out = substitute_quotes(body, ["blog"], RandQuoteCfg(), resolve)
    assert out == "Can't open missing: No such file or directory\n then ok"


def test_other_errors_propagate():
    def resolve(filename):
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        substitute_quotes("<!--quote(x)-->", [], RandQuoteCfg(), resolve)


def test_custom_anchor():
    cfg = RandQuoteCfg(anchor=compile_anchor(r"\[\[quote:([\w-]+)\]\]"))
    out = substitute_quotes("a [[quote:my-file]] b <!--quote(x)-->", [], cfg, lambda f: f.upper())
    assert out == "a MY-FILE b <!--quote(x)-->"


def test_resolved_text_is_not_treated_as_replacement_template():
    out = substitute_quotes("<!--quote(x)-->", [], RandQuoteCfg(), lambda f: r"\1 \g<0>")
    assert out == r"\1 \g<0>"


def test_resolved_quote_is_not_rescanned():
    out = substitute_quotes("<!--quote(x)-->", [], RandQuoteCfg(), lambda f: "<!--quote(y)-->")
    assert out == "<!--quote(y)-->"


def test_default_anchor_pattern():
    assert RandQuoteCfg().anchor.pattern == r"<!--\s*quote\(([./\w]+)\)\s*-->"
    assert isinstance(RandQuoteCfg().anchor, re.Pattern)


def test_optional_group_without_filename_is_left_untouched():
    cfg = RandQuoteCfg(anchor=compile_anchor(r"\{quote(?::(\w+))?\}"))
    out = substitute_quotes("{quote} and {quote:f}", [], cfg, lambda f: f"<{f}>")
    assert out == "{quote} and <f>"

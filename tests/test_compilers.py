# tests/test_compilers.py
from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from scholarurl.builder import example_model, with_target
from scholarurl.compilers import (
    IeeeCompiler,
    ScopusCompiler,
    compile_url,
    get_compiler,
    query_fragment,
)
from scholarurl.errors import UnsupportedTargetError
from scholarurl.models import Operator, QueryModel, Target, TermGroup

NEURAL = ("neural decoding", "brain decoding")


def _params(url: str) -> dict[str, str]:
    query = parse_qs(urlsplit(url).query, keep_blank_values=True)
    return {k: v[0] for k, v in query.items()}


def _model(target: Target, *groups: TermGroup, start=2019, end=2026, limit=50) -> QueryModel:
    return QueryModel(
        target=target,
        groups=groups,
        start_year=start,
        end_year=end,
        results_per_page=limit,
    )


class TestIeee:
    def test_clause_grammar(self):
        assert IeeeCompiler().clause("All Metadata", "neural decoding") == (
            '("All Metadata":"neural decoding")'
        )

    def test_scenario_fragment(self):
        model = _model(Target.IEEE, TermGroup(NEURAL, "All Metadata", Operator.OR))
        assert query_fragment(model) == (
            '(("All Metadata":"neural decoding") OR ("All Metadata":"brain decoding"))'
        )

    def test_scenario_url_params(self):
        model = _model(Target.IEEE, TermGroup(NEURAL, "All Metadata", Operator.OR))
        url = compile_url(model)
        assert url.startswith("https://ieeexplore.ieee.org/search/searchresult.jsp?")
        params = _params(url)
        assert list(params) == ["action", "newsearch", "matchBoolean", "queryText", "ranges"]
        assert params["action"] == "search"
        assert params["newsearch"] == "true"
        assert params["matchBoolean"] == "true"
        assert params["ranges"] == "2019_2026_Year"
        assert unquote(params["queryText"]) == query_fragment(model)

    def test_exact_url(self):
        model = _model(Target.IEEE, TermGroup(("x",), "Title"), start=2020, end=2024)
        assert compile_url(model) == (
            "https://ieeexplore.ieee.org/search/searchresult.jsp"
            "?action=search&newsearch=true&matchBoolean=true"
            "&queryText=%28%28%2522Title%2522%253A%2522x%2522%29%29"
            "&ranges=2020_2024_Year"
        )

    def test_groups_joined_with_and(self):
        model = example_model()
        assert query_fragment(model) == (
            '(("All Metadata":"neural decoding") OR ("All Metadata":"brain decoding"))'
            ' AND (("All Metadata":"visual cortex") OR ("All Metadata":"image reconstruction"))'
        )


class TestScopus:
    def test_clause_grammar(self):
        assert ScopusCompiler().clause("TITLE-ABS-KEY", "neural decoding") == (
            'TITLE-ABS-KEY("neural decoding")'
        )

    def test_scenario_fragment_and_year_clause(self):
        model = _model(Target.SCOPUS, TermGroup(NEURAL, "TITLE-ABS-KEY", Operator.OR))
        assert query_fragment(model) == (
            '(TITLE-ABS-KEY("neural decoding") OR TITLE-ABS-KEY("brain decoding"))'
        )
        params = _params(compile_url(model))
        assert unquote(params["s"]) == (
            '(TITLE-ABS-KEY("neural decoding") OR TITLE-ABS-KEY("brain decoding"))'
            " AND PUBYEAR > 2019 AND PUBYEAR < 2027"
        )

    def test_fixed_params(self):
        model = _model(Target.SCOPUS, TermGroup(NEURAL, "TITLE"), limit=100)
        url = compile_url(model)
        assert url.startswith("https://www.scopus.com/results/results.uri?")
        params = _params(url)
        assert list(params) == [
            "sort",
            "src",
            "sot",
            "sdt",
            "sl",
            "s",
            "origin",
            "editSaveSearch",
            "limit",
        ]
        assert params["sort"] == "plf-f"
        assert params["src"] == "s"
        assert params["sot"] == "a"
        assert params["sdt"] == "a"
        assert params["sl"] == "211"
        assert params["origin"] == "searchadvanced"
        assert params["editSaveSearch"] == ""
        assert params["limit"] == "100"
        assert "ranges" not in params

    def test_exact_url(self):
        model = _model(Target.SCOPUS, TermGroup(("x",), "TITLE"), start=2020, end=2024)
        assert compile_url(model) == (
            "https://www.scopus.com/results/results.uri"
            "?sort=plf-f&src=s&sot=a&sdt=a&sl=211"
            "&s=%28TITLE%28%2522x%2522%29%29"
            "+AND%2520PUBYEAR%2520%253E%25202020%2520AND%2520PUBYEAR%2520%253C%25202025"
            "&origin=searchadvanced&editSaveSearch=&limit=50"
        )


@pytest.mark.parametrize("target", [Target.IEEE, Target.SCOPUS])
def test_compile_is_idempotent(target):
    model = with_target(example_model(), target)
    assert compile_url(model) == compile_url(model)


@pytest.mark.parametrize("target", [Target.IEEE, Target.SCOPUS])
def test_blank_terms_are_filtered(target):
    noisy = _model(target, TermGroup(("", "  ", "x"), "TITLE"))
    clean = _model(target, TermGroup(("x",), "TITLE"))
    assert compile_url(noisy) == compile_url(clean)


def test_terms_are_trimmed():
    model = _model(Target.IEEE, TermGroup(("  x  ",), "Title"))
    assert query_fragment(model) == '(("Title":"x"))'


@pytest.mark.parametrize("target", [Target.IEEE, Target.SCOPUS])
def test_empty_group_is_omitted(target):
    with_empty = _model(
        target,
        TermGroup(("a",), "TITLE"),
        TermGroup(("", " "), "TITLE", Operator.AND),
        TermGroup(("b",), "TITLE"),
    )
    without = _model(target, TermGroup(("a",), "TITLE"), TermGroup(("b",), "TITLE"))
    assert query_fragment(with_empty) == query_fragment(without)
    assert query_fragment(with_empty).count(" AND ") == 1


def test_cross_group_operator_is_always_and():
    model = _model(
        Target.SCOPUS,
        TermGroup(("a", "b"), "KEY", Operator.OR),
        TermGroup(("c", "d"), "KEY", Operator.OR),
    )
    assert query_fragment(model) == '(KEY("a") OR KEY("b")) AND (KEY("c") OR KEY("d"))'


def test_intra_group_and():
    model = _model(Target.IEEE, TermGroup(("a", "b"), "Title", Operator.AND))
    assert query_fragment(model) == '(("Title":"a") AND ("Title":"b"))'


@pytest.mark.parametrize("target", [Target.IEEE, Target.SCOPUS])
def test_no_terms_degrades_to_empty_fragment(target):
    model = _model(target, TermGroup(("", " "), "TITLE"))
    assert query_fragment(model) == ""
    url = compile_url(model)
    assert "(" not in unquote(unquote(url))


def test_unusual_years_still_compile():
    model = _model(Target.SCOPUS, TermGroup(("x",), "TITLE"), start=1500, end=2999)
    params = _params(compile_url(model))
    assert unquote(params["s"]).endswith("AND PUBYEAR > 1500 AND PUBYEAR < 3000")


def test_get_compiler_dispatch():
    assert isinstance(get_compiler(Target.IEEE), IeeeCompiler)
    assert isinstance(get_compiler("scopus"), ScopusCompiler)


def test_unknown_target_raises():
    with pytest.raises(UnsupportedTargetError):
        get_compiler("google-scholar")


def test_unknown_target_on_model_raises():
    model = QueryModel(target="wos", groups=(TermGroup(("x",), "Title"),))  # type: ignore[arg-type]
    with pytest.raises(UnsupportedTargetError):
        compile_url(model)


def test_base_url_override(monkeypatch):
    monkeypatch.setenv("SCHOLARURL_SCOPUS_BASE_URL", "https://scopus.example.org/results.uri")
    model = _model(Target.SCOPUS, TermGroup(("x",), "TITLE"))
    assert compile_url(model).startswith("https://scopus.example.org/results.uri?sort=plf-f")


def test_explicit_base_url_wins(monkeypatch):
    monkeypatch.setenv("SCHOLARURL_IEEE_BASE_URL", "https://env.example.org/search")
    compiler = IeeeCompiler(base_url="https://arg.example.org/search")
    model = _model(Target.IEEE, TermGroup(("x",), "Title"))
    assert compiler.compile(model).startswith("https://arg.example.org/search?action=search")

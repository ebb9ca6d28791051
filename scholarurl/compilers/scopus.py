# scholarurl/compilers/scopus.py
import os

from scholarurl.compilers.base import Compiler
from scholarurl.encoding import encode_component
from scholarurl.models import QueryModel, Target


class ScopusCompiler(Compiler):
    """Scopus advanced search URLs."""

    target = Target.SCOPUS
    BASE_URL = "https://www.scopus.com/results/results.uri"

    def _load_from_env(self) -> str | None:
        return os.getenv("SCHOLARURL_SCOPUS_BASE_URL")

    def clause(self, field: str, term: str) -> str:
        return f'{field}("{term}")'

    def year_clause(self, model: QueryModel) -> str:
        # PUBYEAR comparisons are strict, so the upper bound is end + 1
        return f"AND PUBYEAR > {model.start_year} AND PUBYEAR < {model.end_year + 1}"

    def params(self, model: QueryModel) -> dict[str, str]:
        # The year clause lives in "s" itself, after the encoded expression
        search = (
            f"{encode_component(self.query_fragment(model))} "
            f"{encode_component(self.year_clause(model))}"
        )
        return {
            "sort": "plf-f",
            "src": "s",
            "sot": "a",
            "sdt": "a",
            "sl": "211",
            "s": search,
            "origin": "searchadvanced",
            "editSaveSearch": "",
            "limit": str(model.results_per_page),
        }

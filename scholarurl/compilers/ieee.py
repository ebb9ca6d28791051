# scholarurl/compilers/ieee.py
import os

from scholarurl.compilers.base import Compiler
from scholarurl.encoding import encode_component
from scholarurl.models import QueryModel, Target


class IeeeCompiler(Compiler):
    """IEEE Xplore command search URLs."""

    target = Target.IEEE
    BASE_URL = "https://ieeexplore.ieee.org/search/searchresult.jsp"

    def _load_from_env(self) -> str | None:
        return os.getenv("SCHOLARURL_IEEE_BASE_URL")

    def clause(self, field: str, term: str) -> str:
        return f'("{field}":"{term}")'

    def params(self, model: QueryModel) -> dict[str, str]:
        return {
            "action": "search",
            "newsearch": "true",
            "matchBoolean": "true",
            "queryText": encode_component(self.query_fragment(model)),
            "ranges": f"{model.start_year}_{model.end_year}_Year",
        }

# scholarurl/compilers/base.py
"""Base class for target URL compilers."""

import logging
from abc import ABC, abstractmethod

from scholarurl.encoding import build_query_string
from scholarurl.models import QueryModel, Target, TermGroup

logger = logging.getLogger(__name__)


class Compiler(ABC):
    """Turns a QueryModel into a search URL for one target."""

    target: Target
    BASE_URL: str

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url or self._load_from_env() or self.BASE_URL

    @abstractmethod
    def _load_from_env(self) -> str | None:
        """Load a base URL override from the environment."""
        ...

    @abstractmethod
    def clause(self, field: str, term: str) -> str:
        """Render one term bound to a field."""
        ...

    @abstractmethod
    def params(self, model: QueryModel) -> dict[str, str]:
        """Query-string parameters, in the order they appear in the URL."""
        ...

    def group_clause(self, group: TermGroup) -> str:
        """Parenthesized clauses of one group, or "" if it has no terms."""
        terms = group.clean_terms()
        if not terms:
            return ""
        joined = f" {group.operator.value} ".join(self.clause(group.field, t) for t in terms)
        return f"({joined})"

    def query_fragment(self, model: QueryModel) -> str:
        """Boolean expression across all groups, before any encoding.

        Empty groups are skipped and the rest are always joined with AND.
        """
        clauses = [c for c in (self.group_clause(g) for g in model.groups) if c]
        return " AND ".join(clauses)

    def compile(self, model: QueryModel) -> str:
        url = f"{self.base_url}?{build_query_string(self.params(model))}"
        logger.debug("Compiled %s URL: %s", self.target.value, url)
        return url

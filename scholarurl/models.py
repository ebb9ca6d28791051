# scholarurl/models.py
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from scholarurl.errors import ScholarURLError, UnsupportedTargetError

DEFAULT_START_YEAR = 2020
DEFAULT_END_YEAR = 2024
DEFAULT_RESULTS_PER_PAGE = 50


class Target(StrEnum):
    """Search engine whose URL grammar is produced."""

    IEEE = "ieee"
    SCOPUS = "scopus"

    @classmethod
    def coerce(cls, value: "Target | str") -> "Target":
        """Accept a Target or its (case-insensitive) string tag."""
        if isinstance(value, Target):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedTargetError(value)


class Operator(StrEnum):
    """Boolean operator joining the terms of one group."""

    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class FieldOption:
    """Selectable metadata field: wire value plus display label."""

    value: str
    label: str


@dataclass(frozen=True)
class TermGroup:
    """Terms sharing one field and one intra-group operator."""

    terms: tuple[str, ...]
    field: str
    operator: Operator = Operator.OR

    def clean_terms(self) -> tuple[str, ...]:
        """Trimmed terms with blank entries dropped, in original order."""
        return tuple(t.strip() for t in self.terms if t.strip())


@dataclass(frozen=True)
class QueryModel:
    """Snapshot of a multi-group boolean query and its global parameters."""

    target: Target
    groups: tuple[TermGroup, ...] = ()
    start_year: int = DEFAULT_START_YEAR
    end_year: int = DEFAULT_END_YEAR
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE

    def term_count(self) -> int:
        return sum(len(g.clean_terms()) for g in self.groups)

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target.value,
            "groups": [
                {"terms": list(g.terms), "field": g.field, "operator": g.operator.value}
                for g in self.groups
            ],
            "start_year": self.start_year,
            "end_year": self.end_year,
            "results_per_page": self.results_per_page,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QueryModel":
        """Build a model from the structure produced by ``to_dict``.

        Missing group fields fall back to the target's default field and OR.
        Unknown targets raise UnsupportedTargetError; any other malformed
        value raises ScholarURLError.
        """
        target = Target.coerce(data.get("target", Target.IEEE))
        groups = data.get("groups", ())
        if not isinstance(groups, (list, tuple)):
            raise ScholarURLError("'groups' must be a list")
        return cls(
            target=target,
            groups=tuple(_group_from_dict(g, target) for g in groups),
            start_year=_int_value(data, "start_year", DEFAULT_START_YEAR),
            end_year=_int_value(data, "end_year", DEFAULT_END_YEAR),
            results_per_page=_int_value(data, "results_per_page", DEFAULT_RESULTS_PER_PAGE),
        )


def _group_from_dict(data: Any, target: Target) -> TermGroup:
    from scholarurl.fields import default_field

    if not isinstance(data, dict):
        raise ScholarURLError(f"Group must be an object, got {type(data).__name__}")
    terms = data.get("terms", ())
    if not isinstance(terms, (list, tuple)):
        raise ScholarURLError(f"Group 'terms' must be a list, got {type(terms).__name__}")
    operator = str(data.get("operator", "OR")).upper()
    if operator not in Operator.__members__:
        raise ScholarURLError(f"Unknown operator: {operator!r}")
    return TermGroup(
        terms=tuple(str(t) for t in terms),
        field=data.get("field") or default_field(target),
        operator=Operator(operator),
    )


def _int_value(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    # bool is an int subclass but never a year or page size
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ScholarURLError(f"{key!r} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as e:
        raise ScholarURLError(f"{key!r} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating a model. Errors block generation, warnings do not."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class GeneratedURL:
    """A compiled URL together with the report that allowed it."""

    url: str
    report: ValidationReport = field(default_factory=ValidationReport)

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.report.warnings

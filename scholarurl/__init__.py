# scholarurl/__init__.py
"""scholarurl - Boolean search URL builder for IEEE Xplore and Scopus."""

from scholarurl.builder import (
    add_group,
    add_term,
    blank_model,
    cleared,
    example_model,
    remove_group,
    set_operator,
    set_term,
    with_field,
    with_results_per_page,
    with_target,
    with_years,
)
from scholarurl.compilers import compile_url, get_compiler, query_fragment
from scholarurl.errors import (
    InvalidFieldError,
    ScholarURLError,
    UnsupportedTargetError,
    ValidationError,
)
from scholarurl.fields import default_field, field_options
from scholarurl.generate import generate
from scholarurl.models import (
    FieldOption,
    GeneratedURL,
    Operator,
    QueryModel,
    Target,
    TermGroup,
    ValidationReport,
)
from scholarurl.validate import validate

__all__ = [
    # Models
    "Target",
    "Operator",
    "TermGroup",
    "QueryModel",
    "ValidationReport",
    "FieldOption",
    "GeneratedURL",
    # Core
    "validate",
    "compile_url",
    "query_fragment",
    "get_compiler",
    "generate",
    "field_options",
    "default_field",
    # Model edits
    "example_model",
    "blank_model",
    "with_target",
    "with_field",
    "add_group",
    "remove_group",
    "add_term",
    "set_term",
    "set_operator",
    "with_years",
    "with_results_per_page",
    "cleared",
    # Errors
    "ScholarURLError",
    "ValidationError",
    "UnsupportedTargetError",
    "InvalidFieldError",
]

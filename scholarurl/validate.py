# scholarurl/validate.py
from scholarurl.models import QueryModel, ValidationReport

MIN_PLAUSIBLE_YEAR = 1900
MAX_PLAUSIBLE_YEAR = 2030
MAX_TERMS = 20

NO_TERMS = "at least one search term is required"
YEAR_ORDER = "start year must be less than or equal to end year"
YEAR_RANGE = f"Year range should be between {MIN_PLAUSIBLE_YEAR} and {MAX_PLAUSIBLE_YEAR}"
TOO_MANY_TERMS = "Large number of search terms may result in very long URLs"


def validate(model: QueryModel) -> ValidationReport:
    """Check a model before compilation.

    Every rule runs so the report lists all problems at once. Errors make the
    model invalid; warnings are informational.
    """
    errors: list[str] = []
    warnings: list[str] = []

    total_terms = model.term_count()

    if total_terms == 0:
        errors.append(NO_TERMS)

    if model.start_year > model.end_year:
        errors.append(YEAR_ORDER)

    if model.start_year < MIN_PLAUSIBLE_YEAR or model.end_year > MAX_PLAUSIBLE_YEAR:
        warnings.append(YEAR_RANGE)

    if total_terms > MAX_TERMS:
        warnings.append(TOO_MANY_TERMS)

    return ValidationReport(errors=tuple(errors), warnings=tuple(warnings))

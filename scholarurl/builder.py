# scholarurl/builder.py
"""Immutable edit operations on QueryModel.

Each function returns a new model; the input is never modified.
"""

from dataclasses import replace

from scholarurl.errors import InvalidFieldError
from scholarurl.fields import default_field, is_valid_field
from scholarurl.models import (
    DEFAULT_END_YEAR,
    DEFAULT_RESULTS_PER_PAGE,
    DEFAULT_START_YEAR,
    Operator,
    QueryModel,
    Target,
    TermGroup,
)


def new_group(field: str, operator: Operator = Operator.OR) -> TermGroup:
    """Fresh group with two empty term slots."""
    return TermGroup(terms=("", ""), field=field, operator=operator)


def blank_model(target: Target | str = Target.IEEE) -> QueryModel:
    """Default model with a single empty group."""
    target = Target.coerce(target)
    return QueryModel(target=target, groups=(new_group(default_field(target)),))


def example_model() -> QueryModel:
    """Fixed demonstration query used to seed a new session."""
    field = default_field(Target.IEEE)
    return QueryModel(
        target=Target.IEEE,
        groups=(
            TermGroup(("neural decoding", "brain decoding"), field, Operator.OR),
            TermGroup(("visual cortex", "image reconstruction"), field, Operator.OR),
        ),
        start_year=DEFAULT_START_YEAR,
        end_year=DEFAULT_END_YEAR,
        results_per_page=DEFAULT_RESULTS_PER_PAGE,
    )


def current_field(model: QueryModel) -> str:
    """Field shared by the model's groups, falling back to the target default."""
    for group in model.groups:
        if is_valid_field(model.target, group.field):
            return group.field
    return default_field(model.target)


def with_target(model: QueryModel, target: Target | str) -> QueryModel:
    """Switch target and re-tag every group with the new default field."""
    target = Target.coerce(target)
    field = default_field(target)
    groups = tuple(replace(g, field=field) for g in model.groups)
    return replace(model, target=target, groups=groups)


def with_field(model: QueryModel, field: str) -> QueryModel:
    """Apply ``field`` to every group."""
    if not is_valid_field(model.target, field):
        raise InvalidFieldError(field, model.target)
    return replace(model, groups=tuple(replace(g, field=field) for g in model.groups))


def add_group(model: QueryModel, operator: Operator = Operator.OR) -> QueryModel:
    return replace(model, groups=model.groups + (new_group(current_field(model), operator),))


def remove_group(model: QueryModel, index: int) -> QueryModel:
    _check_group(model, index)
    return replace(model, groups=model.groups[:index] + model.groups[index + 1 :])


def add_term(model: QueryModel, group_index: int, term: str = "") -> QueryModel:
    group = _check_group(model, group_index)
    return _replace_group(model, group_index, replace(group, terms=group.terms + (term,)))


def set_term(model: QueryModel, group_index: int, term_index: int, value: str) -> QueryModel:
    group = _check_group(model, group_index)
    if not 0 <= term_index < len(group.terms):
        raise IndexError(f"Term index {term_index} out of range")
    terms = group.terms[:term_index] + (value,) + group.terms[term_index + 1 :]
    return _replace_group(model, group_index, replace(group, terms=terms))


def set_operator(model: QueryModel, group_index: int, operator: Operator | str) -> QueryModel:
    group = _check_group(model, group_index)
    return _replace_group(model, group_index, replace(group, operator=Operator(operator)))


def with_years(model: QueryModel, start_year: int, end_year: int) -> QueryModel:
    return replace(model, start_year=start_year, end_year=end_year)


def with_results_per_page(model: QueryModel, results_per_page: int) -> QueryModel:
    return replace(model, results_per_page=results_per_page)


def cleared(model: QueryModel) -> QueryModel:
    """Reset everything but the target."""
    return blank_model(model.target)


def _check_group(model: QueryModel, index: int) -> TermGroup:
    if not 0 <= index < len(model.groups):
        raise IndexError(f"Group index {index} out of range")
    return model.groups[index]


def _replace_group(model: QueryModel, index: int, group: TermGroup) -> QueryModel:
    groups = model.groups[:index] + (group,) + model.groups[index + 1 :]
    return replace(model, groups=groups)


def check_fields(model: QueryModel) -> QueryModel:
    """Raise InvalidFieldError if any group's field is not legal for the target."""
    for group in model.groups:
        if not is_valid_field(model.target, group.field):
            raise InvalidFieldError(group.field, model.target)
    return model

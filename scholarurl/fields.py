# scholarurl/fields.py
from scholarurl.errors import UnsupportedTargetError
from scholarurl.models import FieldOption, Target

IEEE_FIELDS: tuple[FieldOption, ...] = (
    FieldOption("All Metadata", "All Metadata"),
    FieldOption("Title", "Title"),
    FieldOption("Abstract", "Abstract"),
    FieldOption("Authors", "Authors"),
    FieldOption("Keywords", "Keywords"),
)

SCOPUS_FIELDS: tuple[FieldOption, ...] = (
    FieldOption("TITLE-ABS-KEY", "Title, Abstract & Keywords"),
    FieldOption("TITLE", "Title"),
    FieldOption("ABS", "Abstract"),
    FieldOption("AUTH", "Authors"),
    FieldOption("KEY", "Keywords"),
)


def field_options(target: Target | str) -> tuple[FieldOption, ...]:
    """Allowed metadata fields for a target, canonical default first."""
    match Target.coerce(target):
        case Target.IEEE:
            return IEEE_FIELDS
        case Target.SCOPUS:
            return SCOPUS_FIELDS
        case other:
            raise UnsupportedTargetError(other)


def default_field(target: Target | str) -> str:
    return field_options(target)[0].value


def is_valid_field(target: Target | str, field: str) -> bool:
    return any(opt.value == field for opt in field_options(target))

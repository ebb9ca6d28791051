# scholarurl/generate.py
import logging

from scholarurl.compilers import compile_url
from scholarurl.errors import ValidationError
from scholarurl.models import GeneratedURL, QueryModel
from scholarurl.validate import validate

logger = logging.getLogger(__name__)


def generate(model: QueryModel) -> GeneratedURL:
    """
    Validate a model and compile it into a search URL.

    Args:
        model: Query snapshot to compile

    Returns:
        GeneratedURL with the URL and the validation report (warnings included)

    Raises:
        ValidationError: if the model has validation errors
        UnsupportedTargetError: if the model's target is not IEEE or Scopus

    Examples:
        result = generate(example_model())
        print(result.url)
    """
    report = validate(model)
    if not report.valid:
        logger.debug("Model rejected: %s", report.errors)
        raise ValidationError(report.errors)

    for warning in report.warnings:
        logger.warning("%s", warning)

    return GeneratedURL(url=compile_url(model), report=report)

# scholarurl/compilers/__init__.py
from scholarurl.errors import UnsupportedTargetError
from scholarurl.models import QueryModel, Target

from .base import Compiler
from .ieee import IeeeCompiler
from .scopus import ScopusCompiler


def get_compiler(target: Target | str) -> Compiler:
    """Compiler for ``target``; unknown targets raise UnsupportedTargetError."""
    match Target.coerce(target):
        case Target.IEEE:
            return IeeeCompiler()
        case Target.SCOPUS:
            return ScopusCompiler()
        case other:
            raise UnsupportedTargetError(other)


def query_fragment(model: QueryModel) -> str:
    """Unencoded boolean expression for the model's target."""
    return get_compiler(model.target).query_fragment(model)


def compile_url(model: QueryModel) -> str:
    """Compile a validated model into its target's search URL.

    Callers must check ``validate(model).valid`` first; invalid models are not
    rejected here.
    """
    return get_compiler(model.target).compile(model)


__all__ = [
    "Compiler",
    "IeeeCompiler",
    "ScopusCompiler",
    "compile_url",
    "get_compiler",
    "query_fragment",
]

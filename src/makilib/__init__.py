from ._core import Pipeable
from ._results import NONE, Err, NoneOption, Ok, Option, Result, ResultUnwrapError, Some
from .types import Description, Name, StringType

__all__ = [
    "NONE",
    "Description",
    "Err",
    "Name",
    "NoneOption",
    "Ok",
    "Option",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Some",
    "StringType",
]

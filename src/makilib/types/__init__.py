from ._description import Description
from ._name import Name
from ._string_type import StringType

__all__ = ["Description", "Name", "StringType"]

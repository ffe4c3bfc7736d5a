# Path: `src/maskedname/features/names/__init__.py`
# Summary: Export name value types, masking helpers and errors.
# Why: Provide a stable import surface for consumers and tests.

from .domain.errors import (
    ArgumentError,
    IndexOutOfRangeError,
    InvariantError,
    MaskedNameError,
    MaskingError,
    PostconditionError,
)
from .domain.masking import (
    check_delimiter,
    escape_for_delimiter,
    is_masked,
    join_masked,
    split_masked,
    unescape,
    validate_masked,
)
from .domain.name import Name
from .domain.component_list_name import ComponentListName
from .domain.delimited_string_name import DelimitedStringName

__all__ = [
    "Name",
    "ComponentListName",
    "DelimitedStringName",
    "check_delimiter",
    "escape_for_delimiter",
    "is_masked",
    "join_masked",
    "split_masked",
    "unescape",
    "validate_masked",
    "MaskedNameError",
    "ArgumentError",
    "IndexOutOfRangeError",
    "MaskingError",
    "InvariantError",
    "PostconditionError",
]

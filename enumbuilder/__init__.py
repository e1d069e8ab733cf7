from . import (
    enum_error,
    enum_meta_properties,
    enum_utils,
    error_kinds,
    handle,
    registry,
)

from .enum_error import (
    DuplicateEnumError,
    EnumError,
    InvalidArgumentsError,
    InvalidEnumError,
    MissingItemError,
    UnsupportedError,
    WriteAttemptError,
    log_error,
)
from .error_kinds import ErrorKinds, Severity
from .handle import EnumHandle
from .registry import (
    REGISTRY,
    EnumRegistry,
    create,
    create_from_names,
    deep_clone,
    exists,
    get,
    get_key_from_value,
    get_keys,
    get_values,
    has_key,
    has_value,
    is_enum_member,
    key_has_value,
    names,
    try_get,
    value_has_key,
)

# Keep in step with the version in setup.py
__version__ = "0.1.0"

"""Registry of named enum tables and the accessor functions over it.

Every operation is available as a method of EnumRegistry and, bound to the process-wide REGISTRY, as a module
level function:

    >>> from enumbuilder import registry
    >>> Colors = registry.create("Colors", {"Red": "Red", "Green": "Green", "Blue": "Blue"})
    >>> Colors.Red
    'Red'
    >>> registry.get_key_from_value("Colors", "Green")
    'Green'
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Hashable, Optional, Union

from enumbuilder.enum_error import (
    DuplicateEnumError,
    EnumError,
    InvalidArgumentsError,
    InvalidEnumError,
    MissingItemError,
    Reporter,
    UnsupportedError,
    log_error,
)
from enumbuilder.error_kinds import Severity
from enumbuilder.handle import EnumHandle, is_reserved_key

logger = logging.getLogger(__name__)


def _location(operation: str, *args) -> str:
    return f"{operation}({', '.join(repr(arg) for arg in args)})"


class EnumRegistry:
    """
    Maps enum names to their frozen tables. Entries are only ever added, by create() and create_from_names().

    :param Reporter reporter: Callable receiving every EnumError before it is raised (or, for recoverable errors,
        instead of it being raised). Defaults to log_error.
    """

    def __init__(self, reporter: Optional[Reporter] = None) -> None:
        self._lock = threading.RLock()
        self._enums: dict[str, EnumHandle] = {}
        self._reporter: Reporter = reporter if reporter is not None else log_error

    def _fail(self, error: EnumError) -> None:
        self._reporter(error)
        if not error.recoverable:
            raise error

    def _table(self, enum_name: str, location: str) -> Mapping:
        if not isinstance(enum_name, str):
            self._fail(InvalidArgumentsError(f"enum name must be of type str, got {type(enum_name).__name__}", location))
        with self._lock:
            handle = self._enums.get(enum_name)
        if handle is None:
            self._fail(InvalidEnumError(f"couldn't find enum '{enum_name}'", location))
        return handle._members

    def create(self, enum_name: str, members: Mapping[Hashable, Any]) -> EnumHandle:
        """
        Copies members into a new frozen table and registers it under enum_name.

        :param str enum_name: Non-empty name, unique within this registry.
        :param Mapping members: Non-empty mapping of key -> value. Copied, so later changes to it have no effect.
        :raises InvalidArgumentsError: enum_name is not a non-empty str, members is not a non-empty mapping, or a key
            clashes with a name the handle itself uses (e.g. "_members", "__doc__").
        :raises DuplicateEnumError: enum_name is already registered. The registered enum is left as it was.
        :return EnumHandle: Read-only handle to the new enum.
        """
        location = _location("create", enum_name)
        if not isinstance(enum_name, str) or len(enum_name.strip()) == 0:
            self._fail(InvalidArgumentsError(f"enum name must be a non-empty str, got {enum_name!r}", location))
        if not isinstance(members, Mapping):
            self._fail(InvalidArgumentsError(f"members must be a mapping, got {type(members).__name__}", location))
        if len(members) == 0:
            self._fail(InvalidArgumentsError("members must not be empty", location))
        reserved = [key for key in members if is_reserved_key(key)]
        if reserved:
            self._fail(
                InvalidArgumentsError(f"keys {reserved} clash with attributes of the enum handle", location)
            )

        handle = EnumHandle(enum_name, members, reporter=self._reporter)
        with self._lock:
            if enum_name in self._enums:
                self._fail(DuplicateEnumError(f"enum '{enum_name}' already exists", location))
            self._enums[enum_name] = handle
        logger.debug(f"Registered enum '{enum_name}' with {len(handle)} members")
        return handle

    def create_from_names(self, enum_name: str, *names: str) -> EnumHandle:
        """
        Creates an enum where every name is both key and value, e.g. create_from_names("Element", "Fire", "Ice").
        A single list or tuple of names is accepted too.
        """
        location = _location("create_from_names", enum_name, *names)
        if len(names) == 1 and isinstance(names[0], (list, tuple)):
            names = tuple(names[0])
        if len(names) == 0:
            self._fail(InvalidArgumentsError("at least one name is required", location))
        for name in names:
            if not isinstance(name, str) or len(name.strip()) == 0:
                self._fail(InvalidArgumentsError(f"names must be non-empty str, got {name!r}", location))
        if len(set(names)) != len(names):
            duplicates = sorted({name for name in names if names.count(name) > 1})
            self._fail(InvalidArgumentsError(f"names must be unique, repeated: {duplicates}", location))
        return self.create(enum_name, {name: name for name in names})

    def get(self, enum_name: str, key: Hashable) -> Any:
        location = _location("get", enum_name, key)
        table = self._table(enum_name, location)
        if not _has(table, key):
            self._fail(MissingItemError(f"'{enum_name}' has no member {key!r}", location))
        return table[key]

    def get_values(self, enum_name: str) -> list:
        return list(self._table(enum_name, _location("get_values", enum_name)).values())

    def get_keys(self, enum_name: str) -> list:
        return list(self._table(enum_name, _location("get_keys", enum_name)).keys())

    def is_enum_member(self, value: Hashable, enum_name: str) -> bool:
        """True if value is one of the keys of enum_name. Note the argument order: value first."""
        return _has(self._table(enum_name, _location("is_enum_member", value, enum_name)), value)

    def has_key(self, enum_name: str, key: Hashable) -> bool:
        return _has(self._table(enum_name, _location("has_key", enum_name, key)), key)

    def has_value(self, enum_name: str, value: Any) -> bool:
        table = self._table(enum_name, _location("has_value", enum_name, value))
        return any(member == value for member in table.values())

    def get_key_from_value(self, enum_name: str, value: Any) -> Union[Hashable, list, None]:
        """
        Reverse lookup.

        :return: The key if exactly one key maps to value, a list of every matching key (in definition order) if
            several do, or None if none do.
        """
        table = self._table(enum_name, _location("get_key_from_value", enum_name, value))
        keys = [key for key, member in table.items() if member == value]
        if len(keys) == 1:
            return keys[0]
        elif len(keys) > 1:
            return keys
        return None

    def deep_clone(self, enum_name: str) -> dict:
        # Shallow copy of the table, owned by the caller. Values are immutable, so this is as deep as it needs to be.
        return dict(self._table(enum_name, _location("deep_clone", enum_name)))

    def exists(self, enum_name: str) -> bool:
        if not isinstance(enum_name, str):
            self._fail(
                InvalidArgumentsError(
                    f"enum name must be of type str, got {type(enum_name).__name__}", _location("exists", enum_name)
                )
            )
        with self._lock:
            return enum_name in self._enums

    def key_has_value(self, enum_name: str, key: Hashable, value: Any) -> bool:
        table = self._table(enum_name, _location("key_has_value", enum_name, key, value))
        return _has(table, key) and table[key] == value

    value_has_key = key_has_value

    def try_get(self, enum_name: str) -> Optional[EnumHandle]:
        """
        Returns the handle registered under enum_name, or None.

        Never raises: failures are reported with warn severity and resolve to None.
        """
        location = _location("try_get", enum_name)
        if not isinstance(enum_name, str):
            self._fail(
                InvalidArgumentsError(
                    f"enum name must be of type str, got {type(enum_name).__name__}", location, severity=Severity.WARN
                )
            )
            return None
        try:
            with self._lock:
                handle = self._enums.get(enum_name)
        except Exception as exc:
            self._fail(UnsupportedError(f"{type(exc).__name__}: {exc}", location))
            return None
        if handle is None:
            self._fail(InvalidEnumError(f"couldn't find enum '{enum_name}'", location, severity=Severity.WARN))
        return handle

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._enums)

    def __contains__(self, enum_name) -> bool:
        with self._lock:
            return isinstance(enum_name, str) and enum_name in self._enums

    def __len__(self) -> int:
        with self._lock:
            return len(self._enums)

    def __repr__(self) -> str:
        return f"<EnumRegistry: {', '.join(self.names())}>"


def _has(table: Mapping, key) -> bool:
    try:
        return key in table
    except TypeError:
        # Unhashable, so it can't be a key
        return False


# Process-wide default registry, backing the module level functions below
REGISTRY = EnumRegistry()

create = REGISTRY.create
create_from_names = REGISTRY.create_from_names
get = REGISTRY.get
get_values = REGISTRY.get_values
get_keys = REGISTRY.get_keys
is_enum_member = REGISTRY.is_enum_member
has_key = REGISTRY.has_key
has_value = REGISTRY.has_value
get_key_from_value = REGISTRY.get_key_from_value
deep_clone = REGISTRY.deep_clone
exists = REGISTRY.exists
key_has_value = REGISTRY.key_has_value
value_has_key = REGISTRY.value_has_key
try_get = REGISTRY.try_get
names = REGISTRY.names

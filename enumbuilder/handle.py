from types import MappingProxyType
from typing import Any, Hashable, Iterator, Mapping, Optional

from enumbuilder.enum_error import EnumError, MissingItemError, Reporter, WriteAttemptError


class EnumHandle:
    """
    Read-only view of one registered enum.

    Members are reachable as attributes (``Colors.Red``) or items (``Colors["Red"]``, which also works for keys
    that aren't valid identifiers). Any attempt to assign or delete a member raises WriteAttemptError.
    The table is copied on construction, so later changes to the caller's mapping are not seen here.
    """

    __slots__ = ("_enum_name", "_members", "_reporter")

    def __init__(self, enum_name: str, members: Mapping[Hashable, Any], reporter: Optional[Reporter] = None):
        object.__setattr__(self, "_enum_name", enum_name)
        object.__setattr__(self, "_members", MappingProxyType(dict(members)))
        object.__setattr__(self, "_reporter", reporter)

    def _raise(self, error: EnumError):
        if self._reporter is not None:
            self._reporter(error)
        raise error

    def _lookup(self, key: Hashable, location: str) -> Any:
        if key not in self:
            self._raise(MissingItemError(f"'{self._enum_name}' has no member {key!r}", location))
        return self._members[key]

    def __getattr__(self, key: str) -> Any:
        # Only reached when normal lookup fails. Dunder probes (copy, pickle, etc.) are not member lookups.
        if key in EnumHandle.__slots__ or (key.startswith("__") and key.endswith("__")):
            raise AttributeError(key)
        location = f"{self._enum_name}.{key}"
        if key.startswith("_") and key not in self:
            # Private name probes (hasattr(handle, "_repr_html_") and the like) are not reported
            raise MissingItemError(f"'{self._enum_name}' has no member {key!r}", location)
        return self._lookup(key, location)

    def __getitem__(self, key: Hashable) -> Any:
        return self._lookup(key, f"{self._enum_name}[{key!r}]")

    def __setattr__(self, key: str, value) -> None:
        self._raise(WriteAttemptError(f"can't set {key!r}", f"{self._enum_name}.{key}"))

    def __delattr__(self, key: str) -> None:
        self._raise(WriteAttemptError(f"can't delete {key!r}", f"{self._enum_name}.{key}"))

    def __setitem__(self, key: Hashable, value) -> None:
        self._raise(WriteAttemptError(f"can't set {key!r}", f"{self._enum_name}[{key!r}]"))

    def __delitem__(self, key: Hashable) -> None:
        self._raise(WriteAttemptError(f"can't delete {key!r}", f"{self._enum_name}[{key!r}]"))

    def __contains__(self, key) -> bool:
        try:
            return key in self._members
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __dir__(self):
        members = {key for key in self._members if isinstance(key, str) and key.isidentifier()}
        return sorted(set(object.__dir__(self)) | members)

    def __repr__(self) -> str:
        members = ", ".join(f"{key}={value!r}" for key, value in self._members.items())
        return f"<enum {self._enum_name}: {members}>"

    # Immutable, so copies are the handle itself
    def __copy__(self) -> "EnumHandle":
        return self

    def __deepcopy__(self, memo) -> "EnumHandle":
        return self


_HANDLE_ATTRIBUTES = frozenset(dir(EnumHandle))


def is_reserved_key(key: Hashable) -> bool:
    """True if key can't be reached as an attribute of a handle, because the handle itself uses that name."""
    if not isinstance(key, str):
        return False
    return key in _HANDLE_ATTRIBUTES or (key.startswith("__") and key.endswith("__"))

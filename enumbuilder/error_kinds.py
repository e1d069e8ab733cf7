from enumbuilder.enum_meta_properties import EnumMetaProperties


class Severity(metaclass=EnumMetaProperties):
    """
    How an error is surfaced. WARN is recoverable: it is reported and the operation resolves to its "absent"
    result. ERROR is reported and then raised, halting the offending call path.
    """

    def __init__(self):
        raise Exception("This is intended to act akin to an enum. Don't instantiate it.")

    WARN = "warn"
    ERROR = "error"

    _all: tuple[str, ...] = (WARN, ERROR)


# Abstract base class. Leverages the metaclass above to prevent its (effectively) constants from being modified.
class ErrorKind(metaclass=EnumMetaProperties):
    name: str
    severity: str
    description: str

    def __init__(self):
        raise Exception("This is intended to act akin to an enum. Don't instantiate it.")


class InvalidEnum(ErrorKind):
    """
    Referenced enum name is not registered
    """

    name = "InvalidEnum"
    severity = Severity.ERROR
    description = "enum is not registered"


class MissingItem(ErrorKind):
    """
    Referenced key not found in a registered enum
    """

    name = "MissingItem"
    severity = Severity.ERROR
    description = "item not found in enum"


class InvalidArguments(ErrorKind):
    """
    Caller passed a value of the wrong shape, e.g. a non-string enum name or an empty member set
    """

    name = "InvalidArguments"
    severity = Severity.ERROR
    description = "invalid arguments"


class DuplicateEnum(ErrorKind):
    """
    Attempted to register a name that is already in use
    """

    name = "DuplicateEnum"
    severity = Severity.ERROR
    description = "enum name already registered"


class NewIndex(ErrorKind):
    """
    Attempted to assign, reassign or delete a member of a frozen enum
    """

    name = "newIndex"
    severity = Severity.ERROR
    description = "enums are read-only after creation"


class Unsupported(ErrorKind):
    """
    An operation failed unexpectedly and was caught generically
    """

    name = "UnsupportedError"
    severity = Severity.WARN
    description = "unsupported operation"


class ErrorKinds(metaclass=EnumMetaProperties):
    """
    All error kinds that can be reported by enumbuilder.
    """

    def __init__(self):
        raise Exception("This is intended to act akin to an enum. Don't instantiate it.")

    INVALID_ENUM = InvalidEnum
    MISSING_ITEM = MissingItem
    INVALID_ARGUMENTS = InvalidArguments
    DUPLICATE_ENUM = DuplicateEnum
    NEW_INDEX = NewIndex
    UNSUPPORTED = Unsupported

    # To support search function below
    _all: tuple[type[ErrorKind], ...] = (
        InvalidEnum,
        MissingItem,
        InvalidArguments,
        DuplicateEnum,
        NewIndex,
        Unsupported,
    )

    @staticmethod
    def from_name(name: str) -> type[ErrorKind]:
        """
        Returns the relevant static ErrorKind object, given the kind's name (case insensitive).
        :param str name: The name of the kind e.g. 'InvalidEnum', 'MissingItem', 'newIndex'.
        """
        if name is None or len(name.strip()) == 0:
            raise ValueError("Error kind name passed was None or effectively empty!", name)
        lowered = name.strip().lower()
        for kind in ErrorKinds:
            if lowered == kind.name.lower():
                return kind
        raise ValueError(f"No known error kind with name '{name}'")

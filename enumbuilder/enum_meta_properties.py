class EnumMetaProperties(type):
    """
    Metaclass for classes that act as a fixed set of constants (error kinds, severities).

    This metaclass:
     - rejects attempts to set or delete *class* attributes once the class body has run.
       - NOTE: the class using this should also define an __init__() which raises an exception, to prevent
         instantiation.
     - lets a class listing its members in an ``_all`` tuple be iterated and tested with ``in``.
     - defines the class string representation as being *just* the class name.
    """

    def __setattr__(cls, name: str, value) -> None:
        raise AttributeError(f"{cls}.{name} is a constant and can't be reassigned")

    def __delattr__(cls, name: str) -> None:
        raise AttributeError(f"{cls}.{name} is a constant and can't be deleted")

    def __iter__(cls):
        return iter(cls._all)

    def __contains__(cls, item) -> bool:
        return item in cls._all

    def __repr__(cls) -> str:
        return cls.__name__

import unittest

from enumbuilder.enum_error import (
    DuplicateEnumError,
    EnumError,
    InvalidArgumentsError,
    InvalidEnumError,
    MissingItemError,
    UnsupportedError,
    WriteAttemptError,
    log_error,
)
from enumbuilder.error_kinds import ErrorKind, ErrorKinds, Severity


class TestErrorKinds(unittest.TestCase):
    def test_name_to_error_kind(self):
        self.assertEqual(ErrorKinds.from_name("InvalidEnum"), ErrorKinds.INVALID_ENUM)
        self.assertEqual(ErrorKinds.from_name("newIndex"), ErrorKinds.NEW_INDEX)
        self.assertEqual(ErrorKinds.from_name("unsupportederror"), ErrorKinds.UNSUPPORTED)
        self.assertRaises(ValueError, ErrorKinds.from_name, name="WriteAttempt")
        self.assertRaises(ValueError, ErrorKinds.from_name, name="")
        self.assertRaises(ValueError, ErrorKinds.from_name, name=" ")

    def test_immutability(self):
        def update_base_attribute():
            ErrorKind.name = "someNewValue"

        def update_kind_attribute():
            ErrorKinds.MISSING_ITEM.severity = Severity.WARN

        def delete_kind():
            del ErrorKinds.MISSING_ITEM

        def update_severity():
            Severity.WARN = "error"

        self.assertRaises(AttributeError, update_base_attribute)
        self.assertRaises(AttributeError, update_kind_attribute)
        self.assertRaises(AttributeError, delete_kind)
        self.assertRaises(AttributeError, update_severity)
        self.assertEqual(ErrorKinds.MISSING_ITEM.severity, Severity.ERROR)

        self.assertRaises(Exception, ErrorKind)
        self.assertRaises(Exception, ErrorKinds.INVALID_ENUM)
        self.assertRaises(Exception, ErrorKinds)
        self.assertRaises(Exception, Severity)

    def test_iteration(self):
        self.assertEqual(list(Severity), ["warn", "error"])
        self.assertIn("warn", Severity)
        self.assertNotIn("fatal", Severity)
        self.assertEqual(len(list(ErrorKinds)), 6)
        self.assertIn(ErrorKinds.NEW_INDEX, ErrorKinds)
        self.assertEqual([kind.name for kind in ErrorKinds][-1], "UnsupportedError")

    def test_repr(self):
        self.assertEqual(repr(ErrorKinds.DUPLICATE_ENUM), "DuplicateEnum")

    def test_default_severities(self):
        self.assertEqual(ErrorKinds.UNSUPPORTED.severity, Severity.WARN)
        for kind in (
            ErrorKinds.INVALID_ENUM,
            ErrorKinds.MISSING_ITEM,
            ErrorKinds.INVALID_ARGUMENTS,
            ErrorKinds.DUPLICATE_ENUM,
            ErrorKinds.NEW_INDEX,
        ):
            self.assertEqual(kind.severity, Severity.ERROR, kind)


class TestEnumError(unittest.TestCase):
    def test_kinds(self):
        self.assertIs(InvalidEnumError("x").kind, ErrorKinds.INVALID_ENUM)
        self.assertIs(MissingItemError("x").kind, ErrorKinds.MISSING_ITEM)
        self.assertIs(InvalidArgumentsError("x").kind, ErrorKinds.INVALID_ARGUMENTS)
        self.assertIs(DuplicateEnumError("x").kind, ErrorKinds.DUPLICATE_ENUM)
        self.assertIs(WriteAttemptError("x").kind, ErrorKinds.NEW_INDEX)
        self.assertIs(UnsupportedError("x").kind, ErrorKinds.UNSUPPORTED)

    def test_severity(self):
        error = MissingItemError("no such key", "get('Colors', 'Purple')")
        self.assertEqual(error.severity, Severity.ERROR)
        self.assertFalse(error.recoverable)

        warning = InvalidEnumError("no such enum", "try_get('Shapes')", severity=Severity.WARN)
        self.assertEqual(warning.severity, Severity.WARN)
        self.assertTrue(warning.recoverable)

        self.assertTrue(UnsupportedError("boom").recoverable)
        self.assertRaises(ValueError, EnumError, "x", severity="fatal")

    def test_str(self):
        error = MissingItemError("'Colors' has no member 'Purple'", "get('Colors', 'Purple')")
        self.assertEqual(
            str(error), "[EnumBuilder] (ERROR) MissingItem in get('Colors', 'Purple'): 'Colors' has no member 'Purple'"
        )
        self.assertEqual(str(UnsupportedError("boom")), "[EnumBuilder] (WARN) UnsupportedError: boom")

    def test_builtin_bases(self):
        self.assertIsInstance(MissingItemError("x"), KeyError)
        self.assertIsInstance(MissingItemError("x"), AttributeError)
        self.assertIsInstance(WriteAttemptError("x"), AttributeError)
        self.assertIsInstance(InvalidArgumentsError("x"), ValueError)
        self.assertIsInstance(DuplicateEnumError("x"), ValueError)
        self.assertIsInstance(InvalidEnumError("x"), KeyError)
        self.assertIsInstance(UnsupportedError("x"), RuntimeError)

    def test_log_error(self):
        with self.assertLogs("enumbuilder", level="WARNING") as logs:
            log_error(UnsupportedError("boom", "try_get('Shapes')"))
            log_error(DuplicateEnumError("enum 'Colors' already exists", "create('Colors')"))
        self.assertEqual(
            logs.output,
            [
                "WARNING:enumbuilder:[EnumBuilder] (WARN) UnsupportedError in try_get('Shapes'): boom",
                "ERROR:enumbuilder:[EnumBuilder] (ERROR) DuplicateEnum in create('Colors'): enum 'Colors' already exists",
            ],
        )

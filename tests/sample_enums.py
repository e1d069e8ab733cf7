# Enums registered on the process-wide registry when imported. Used by the enumq command line tests.
import enumbuilder

CliColors = enumbuilder.create("CliColors", {"Red": "Red", "Green": "Green", "Blue": "Blue"})
CliStatus = enumbuilder.create("CliStatus", {"Active": 1, "Inactive": 0})

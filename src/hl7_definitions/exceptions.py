# src/hl7_definitions/exceptions.py
"""
Custom exceptions for hl7_definitions.

All exceptions inherit from HL7DefinitionsError so that build tooling can
catch schema-compilation failures without grabbing unrelated built-in
exceptions. The runtime query API never raises these: a missing table,
version or definition is reported as None.
"""


class HL7DefinitionsError(Exception):
    """Base class for all hl7_definitions exceptions."""

    pass


class SourceError(HL7DefinitionsError):
    """Raised when a definition source document cannot be read or is malformed."""

    pass


class CompileError(HL7DefinitionsError):
    """Raised when source documents cannot be lowered into the lookup store."""

    pass

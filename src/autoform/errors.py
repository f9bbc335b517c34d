"""Exception definitions for autoform"""


class AutoformException(Exception):
    """Base exception for all autoform errors.

    All custom exceptions in autoform inherit from this class.
    Use this as a catch-all for autoform-specific errors when you don't need
    to handle specific exception types.
    """

    pass


class ShapeViolationError(AutoformException):
    """Raised when a schema does not have the shape an operation requires.

    Use this exception when:
    - The root handed to introspection is not an object node
    - The value handed to the schema adapter is neither a mapping nor an
      object exposing schema attributes
    """

    pass


class ConfigException(AutoformException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (invalid values, unknown override keys)
    """

    pass

"""Exception classes for innertext.

Text collection itself never raises: malformed nodes are treated as empty and
unknown nodes contribute nothing. Errors only come from the edges of the
package, where configuration is validated and trees are loaded.
"""

from __future__ import annotations


class InnerTextError(Exception):
    """Base exception for all innertext errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(InnerTextError, ValueError):
    """Invalid configuration value.

    Raised when an option such as ``whitespace`` holds a value outside its
    allowed set.
    """

    def __init__(self, option: str, value: object, allowed: tuple[str, ...]) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "whitespace")
            value: The rejected value
            allowed: Values the option accepts
        """
        self.option = option
        self.value = value
        self.allowed = allowed
        choices = ", ".join(repr(a) for a in allowed)
        super().__init__(f"Invalid {option} {value!r}: expected one of {choices}")


class DeserializationError(InnerTextError, ValueError):
    """Error while loading a tree from dict or JSON data.

    Raised when the data does not describe a node at all. Unknown node types
    are not an error; they load as ``Unknown`` nodes.
    """

    def __init__(self, message: str, path: str = "$") -> None:
        """Initialize deserialization error.

        Args:
            message: Error description
            path: Location of the bad node in the input, like "$.children[2]"
        """
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}")


class ClassifierError(InnerTextError, TypeError):
    """Error when building an element test from an unsupported value."""

    pass

class PatternError(ValueError):
    """
    Exception raised when a glob pattern cannot be compiled.

    Pattern errors are detected before any tree traversal takes place. They are not
    retryable: the caller has to supply a corrected pattern.

    Attributes:
        pattern (str): The pattern that failed to compile.
        reason (str): Description of what is wrong with the pattern.

    Example:
        >>> error = PatternError("src/[abc", "unclosed character class at index 4")
        >>> str(error)
        "Invalid glob pattern 'src/[abc': unclosed character class at index 4"
        >>> error.pattern
        'src/[abc'
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the offending pattern and the failure reason.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str): Description of what is wrong with the pattern.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern {pattern!r}: {reason}")


class BundleFormatError(ValueError):
    """
    Exception raised when a serialized bundle does not describe a valid snapshot.

    Attributes:
        location (str): Where in the document the problem was found, as a dotted path
            such as ``root.dirs[0].files[2]``.

    Example:
        >>> error = BundleFormatError("root.files[0]", "missing 'contents'")
        >>> str(error)
        "Malformed bundle at root.files[0]: missing 'contents'"
    """

    def __init__(self, location: str, message: str) -> None:
        """
        Initialize the exception.

        Args:
            location (str): Location of the problem inside the document.
            message (str): Description of the problem.
        """
        self.location = location
        super().__init__(f"Malformed bundle at {location}: {message}")

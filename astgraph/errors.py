"""
Extraction errors for astgraph.

Both errors abort an extraction pass; no partial graph is returned.
"""


class ExtractionError(Exception):
    """Base class for failures while turning source code into a graph."""


class ParseFailure(ExtractionError):
    """The source could not be parsed into a syntax tree."""


class UnsupportedCallShape(ExtractionError):
    """
    A call's callee expression cannot be resolved to a name.

    Attributes:
        shape: Description of the offending expression (e.g. "Subscript")
    """

    def __init__(self, shape: str) -> None:
        self.shape = shape
        super().__init__(f"unsupported callee expression: {shape}")

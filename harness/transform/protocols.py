"""Protocol interface for source transformers."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SourceTransformer(Protocol):
    """Protocol for preset source transformers.

    A preset adapts test source files before they are executed (for example
    compiling TypeScript to JavaScript). Any object implementing
    ``transform`` with the matching signature can be registered.
    """

    def transform(self, source: str, path: str) -> str:
        """Transform a source file.

        Args:
            source: Original file contents.
            path: Path of the file being transformed.

        Returns:
            Transformed file contents.
        """
        ...


class IdentityTransformer:
    """Passes source through unmodified."""

    def transform(self, source: str, path: str) -> str:  # noqa: ARG002
        """Return the source unchanged."""
        return source

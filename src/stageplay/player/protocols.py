"""Protocol definitions for dependency injection in MediaPlayer."""

from typing import Protocol


class DecoderBackend(Protocol):
    """Protocol for the media backend a MediaPlayer drives.

    Each method corresponds to one setup step of the player. Implementations
    are free to do real work; the bundled console backend only prints.
    """

    def open_source(self, source: str) -> None:
        """Open the media source.

        Args:
            source: Identifier of the media to open, usually a filename.
        """
        ...

    def apply_arguments(self, arguments: str) -> None:
        """Apply the player arguments.

        Args:
            arguments: Free-form argument string.
        """
        ...

    def apply_flags(self, flags: int) -> None:
        """Apply a positive flag set.

        Args:
            flags: Flag bits. Only ever called with a positive value.
        """
        ...

    def decode(self) -> None:
        """Decode the opened source so it can be played."""
        ...

    def play(self) -> None:
        """Play the decoded media."""
        ...

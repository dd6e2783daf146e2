"""Parser options shared by the sniffer and the RIFF walker."""

from dataclasses import dataclass
from enum import Enum

from .constants import SKIP_BLOCK_SIZE


class UnknownChunkPolicy(str, Enum):
    """What the walker does with a chunk id it has no handler for."""

    STRICT = "strict"  # raise UnrecognizedChunkError
    SKIP = "skip"  # discard the payload and continue


@dataclass(frozen=True)
class ParserOptions:
    """Immutable settings for a single parse.

    Attributes:
        unknown_chunks: Policy for chunk ids outside the allow-list
        pad_odd_chunks: Consume the RIFF pad byte after odd-length payloads
        skip_block_size: Largest block read at once when discarding payloads
    """

    unknown_chunks: UnknownChunkPolicy = UnknownChunkPolicy.STRICT
    pad_odd_chunks: bool = True
    skip_block_size: int = SKIP_BLOCK_SIZE

    def __post_init__(self):
        try:
            policy = UnknownChunkPolicy(self.unknown_chunks)
        except ValueError:
            choices = ", ".join(p.value for p in UnknownChunkPolicy)
            raise ValueError(
                f"Invalid unknown chunk policy: {self.unknown_chunks!r} "
                f"(expected one of: {choices})"
            )
        # frozen dataclass, so go through object.__setattr__
        object.__setattr__(self, "unknown_chunks", policy)

        if not isinstance(self.skip_block_size, int) or self.skip_block_size <= 0:
            raise ValueError(
                f"Skip block size must be a positive integer, got {self.skip_block_size!r}"
            )

    @property
    def strict(self) -> bool:
        return self.unknown_chunks is UnknownChunkPolicy.STRICT

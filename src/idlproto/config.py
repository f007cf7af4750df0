"""Configuration for proto emission.

This module provides the configuration dataclass consumed by the default
handler-inclusion policy and the comment formatter.
"""

from __future__ import annotations

from dataclasses import dataclass

# Longest comment prefix the emitter writes
_MAX_COMMENT_PREFIX = len("  // ")


@dataclass(frozen=True)
class EmitterConfig:
    """Configuration for a proto emission pass.

    Attributes:
        include_roles: Role names to emit (default: all roles).
            When non-empty, roles not listed here are skipped entirely.

        exclude_roles: Role names to skip, checked before include_roles.

        comment_width: Column at which description comments are wrapped
            (default 80). Includes the comment prefix.

    Examples:
        ```python
        from idlproto import EmitterConfig, to_proto

        # Only emit the public API service
        config = EmitterConfig(include_roles=("Calculator",))

        # Everything but the admin service, with narrow comments
        config = EmitterConfig(exclude_roles=("Admin",), comment_width=60)

        proto = to_proto(document, config=config)
        ```
    """

    include_roles: tuple[str, ...] = ()
    exclude_roles: tuple[str, ...] = ()
    comment_width: int = 80

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.comment_width <= _MAX_COMMENT_PREFIX:
            raise ValueError(
                f"comment_width must be > {_MAX_COMMENT_PREFIX}, got {self.comment_width}"
            )

        overlap = sorted(set(self.include_roles) & set(self.exclude_roles))
        if overlap:
            raise ValueError(f"roles both included and excluded: {', '.join(overlap)}")

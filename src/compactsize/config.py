"""Configuration for the VarUint codec.

This module provides the configuration dataclass that controls the
large-value diagnostic emitted while constructing VarUint values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

DiagnosticSink = Callable[[str], None]


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for VarUint construction and parsing.

    Values decoded from a desynchronized stream tend to be huge, so every
    VarUint whose value exceeds ``large_value_threshold`` is reported to the
    diagnostic sink. The report is advisory only; construction always
    proceeds.

    Attributes:
        large_value_threshold: Values strictly greater than this are reported
            (default 999_999). ``None`` disables the check.

        sink: Callable receiving the formatted diagnostic message. ``None``
            (the default) routes messages to the ``compactsize.codec.varuint``
            logger at WARNING level.

    Examples:
        ```python
        from compactsize import CodecConfig, VarUint

        messages = []
        config = CodecConfig(large_value_threshold=100, sink=messages.append)
        VarUint.from_u16(4444, config=config)
        assert len(messages) == 1
        ```
    """

    large_value_threshold: Optional[int] = 999_999
    sink: Optional[DiagnosticSink] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.large_value_threshold is not None and self.large_value_threshold < 0:
            raise ValueError(
                f"large_value_threshold must be >= 0 or None, got {self.large_value_threshold}"
            )

    def is_suspicious(self, value: int) -> bool:
        """Return True if value should be reported to the sink."""
        return self.large_value_threshold is not None and value > self.large_value_threshold


DEFAULT_CONFIG = CodecConfig()

"""Library configuration."""
import os
from dataclasses import dataclass

DUPLICATE_TARGET_POLICIES = ("warn", "error", "last_wins")


@dataclass
class MapperSettings:
    """Settings shared by mappers and the command line."""

    duplicate_targets: str = "warn"  # "warn", "error", "last_wins"
    log_level: str = "WARNING"
    json_indent: int = 2

    def __post_init__(self):
        """Validate values."""
        if self.duplicate_targets not in DUPLICATE_TARGET_POLICIES:
            raise ValueError(
                f"Invalid duplicate target policy: {self.duplicate_targets} "
                f"(expected one of {', '.join(DUPLICATE_TARGET_POLICIES)})"
            )

    @classmethod
    def from_env(cls) -> "MapperSettings":
        """
        Load settings from environment variables

        Raises:
            ValueError: A FIELDMAP_* variable holds an invalid value
        """
        indent = os.getenv("FIELDMAP_JSON_INDENT", "2")
        try:
            json_indent = int(indent)
        except ValueError:
            raise ValueError(
                f"Invalid FIELDMAP_JSON_INDENT: {indent!r} (expected an integer)"
            ) from None

        policy = os.getenv("FIELDMAP_DUPLICATE_TARGETS", "warn").lower()
        if policy not in DUPLICATE_TARGET_POLICIES:
            raise ValueError(
                f"Invalid FIELDMAP_DUPLICATE_TARGETS: {policy!r} "
                f"(expected one of {', '.join(DUPLICATE_TARGET_POLICIES)})"
            )

        return cls(
            duplicate_targets=policy,
            log_level=os.getenv("FIELDMAP_LOG_LEVEL", "WARNING").upper(),
            json_indent=json_indent,
        )


# Global instance
settings = MapperSettings.from_env()

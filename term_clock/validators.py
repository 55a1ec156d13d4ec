"""
Validation framework for term-clock configuration documents.

Checks a parsed TOML document before it is turned into a ``Config``: errors
abort loading, warnings are only logged.
"""

from dataclasses import dataclass, field

from .color import Color
from .position import Anchor


@dataclass
class ValidationResult:
    """Collects errors and warnings from validation checks."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, msg: str):
        self.errors.append(msg)

    def add_warning(self, msg: str):
        self.warnings.append(msg)

    def merge(self, other: "ValidationResult"):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


# ─── Schema ──────────────────────────────────────────────────────

INTERVAL_KEYS = ("interval", "interval-ms")
MAX_INTERVAL_MS = 60 * 60 * 1000

SECTION_KEYS: dict[str, set[str]] = {
    "general": {"color", *INTERVAL_KEYS, "blink", "bold"},
    "position": {"horizontal", "vertical"},
    "date": {"fmt", "use_12h", "utc", "hide_seconds"},
}

BOOL_KEYS: dict[str, set[str]] = {
    "general": {"blink", "bold"},
    "position": set(),
    "date": {"use_12h", "utc", "hide_seconds"},
}


def validate_config_data(data: dict) -> ValidationResult:
    """Validate the content of a configuration document."""
    result = ValidationResult()

    if not isinstance(data, dict):
        result.add_error("configuration must be a table")
        return result

    for section, value in data.items():
        if section not in SECTION_KEYS:
            result.add_warning(f"Unknown section '{section}' ignored")
            continue
        if not isinstance(value, dict):
            result.add_error(f"[{section}] must be a table, got {type(value).__name__}")
            continue
        result.merge(_validate_section(section, value))

    return result


def _validate_section(section: str, table: dict) -> ValidationResult:
    result = ValidationResult()

    for key in table:
        if key not in SECTION_KEYS[section]:
            result.add_warning(f"Unknown key '{section}.{key}' ignored")

    for key in BOOL_KEYS[section]:
        if key in table and not isinstance(table[key], bool):
            result.add_error(f"'{section}.{key}' must be a boolean, got {table[key]!r}")

    if section == "general":
        result.merge(_validate_general(table))
    elif section == "position":
        for key in ("horizontal", "vertical"):
            value = table.get(key)
            if value is not None and value not in Anchor.names():
                result.add_error(
                    f"Invalid '{section}.{key}' value {value!r}. "
                    f"Must be one of: {', '.join(Anchor.names())}"
                )
    elif section == "date":
        fmt = table.get("fmt")
        if fmt is not None and not isinstance(fmt, str):
            result.add_error(f"'date.fmt' must be a string, got {fmt!r}")

    return result


def _validate_general(table: dict) -> ValidationResult:
    result = ValidationResult()

    color = table.get("color")
    if color is not None:
        if not isinstance(color, str):
            result.add_error(f"'general.color' must be a string, got {color!r}")
        else:
            try:
                Color.parse(color)
            except ValueError as e:
                result.add_error(str(e))

    present = [key for key in INTERVAL_KEYS if key in table]
    if len(present) > 1:
        result.add_warning("Both 'general.interval' and 'general.interval-ms' set; using 'interval'")
    for key in present:
        interval = table[key]
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            result.add_error(
                f"'general.{key}' must be a positive number of milliseconds, got {interval!r}"
            )
        elif interval > MAX_INTERVAL_MS:
            result.add_error(
                f"'general.{key}' must be at most {MAX_INTERVAL_MS} milliseconds, got {interval}"
            )

    return result

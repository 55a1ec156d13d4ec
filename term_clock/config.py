"""
Display configuration for term-clock.

A ``Config`` is built from defaults, overlaid by the TOML configuration file,
overlaid by command-line options. The file lives at ``$CONF_PATH`` or
``<config dir>/term-clock/conf.toml``; ``CONF_PATH=None`` disables it.
"""

import logging
import os
import sys
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from .clock.mode import DEFAULT_DATE_FORMAT
from .color import Color
from .errors import ConfigParseFailed, ConfigPathInvalid, ConfigReadFailed
from .position import Anchor
from .validators import validate_config_data

logger = logging.getLogger(__name__)

# ─── Constants ───────────────────────────────────────────────────

DEFAULT_INTERVAL_MS = 200

CONFIG_ENV = "CONF_PATH"
CONFIG_DISABLED = "None"
APP_DIR_NAME = "term-clock"
CONFIG_FILE_NAME = "conf.toml"


# ─── Data Classes ────────────────────────────────────────────────


@dataclass
class GeneralConfig:
    color: Color = field(default_factory=Color.default)
    interval: int = DEFAULT_INTERVAL_MS
    blink: bool = False
    bold: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> "GeneralConfig":
        color = d.get("color")
        return cls(
            color=Color.parse(color) if color is not None else Color.default(),
            interval=d.get("interval", d.get("interval-ms", DEFAULT_INTERVAL_MS)),
            blink=d.get("blink", False),
            bold=d.get("bold", False),
        )


@dataclass
class PositionConfig:
    horizontal: Anchor = Anchor.CENTER
    vertical: Anchor = Anchor.CENTER

    @classmethod
    def from_dict(cls, d: dict) -> "PositionConfig":
        return cls(
            horizontal=Anchor(d.get("horizontal", Anchor.CENTER.value)),
            vertical=Anchor(d.get("vertical", Anchor.CENTER.value)),
        )


@dataclass
class DateConfig:
    fmt: str = DEFAULT_DATE_FORMAT
    use_12h: bool = False
    utc: bool = False
    hide_seconds: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> "DateConfig":
        return cls(
            fmt=d.get("fmt", DEFAULT_DATE_FORMAT),
            use_12h=d.get("use_12h", False),
            utc=d.get("utc", False),
            hide_seconds=d.get("hide_seconds", False),
        )


@dataclass
class Config:
    """Complete display configuration snapshot."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    position: PositionConfig = field(default_factory=PositionConfig)
    date: DateConfig = field(default_factory=DateConfig)

    @classmethod
    def from_dict(cls, d: dict) -> "Config":
        """Build a config from an already validated document."""
        return cls(
            general=GeneralConfig.from_dict(d.get("general", {})),
            position=PositionConfig.from_dict(d.get("position", {})),
            date=DateConfig.from_dict(d.get("date", {})),
        )


# ─── Discovery ───────────────────────────────────────────────────


def config_dir(environ: dict | None = None) -> Path | None:
    """Return the per-user configuration directory for this platform."""
    env = os.environ if environ is None else environ

    if sys.platform == "win32":
        local = env.get("LOCALAPPDATA")
        return Path(local) if local else None

    try:
        home = Path.home()
    except RuntimeError:
        return None

    if sys.platform == "darwin":
        return home / "Library" / "Application Support"

    xdg = env.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return home / ".config"


def resolve_config_path(environ: dict | None = None) -> Path | None:
    """
    Locate the configuration file.

    Returns:
        The path from ``$CONF_PATH``, else the default location if that file
        exists, else None. ``CONF_PATH=None`` always yields None.

    Raises:
        ConfigPathInvalid: The path cannot be represented as unicode.
    """
    env = os.environ if environ is None else environ

    env_path = env.get(CONFIG_ENV)
    if env_path is not None:
        if env_path == CONFIG_DISABLED:
            return None
        _ensure_unicode(env_path)
        return Path(env_path)

    directory = config_dir(env)
    if directory is None:
        return None

    path = directory / APP_DIR_NAME / CONFIG_FILE_NAME
    _ensure_unicode(str(path))
    return path if path.exists() else None


def _ensure_unicode(path: str):
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        lossy = path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        raise ConfigPathInvalid(lossy) from None


# ─── Loading ─────────────────────────────────────────────────────


def load_config(path: Path | None) -> Config:
    """
    Load a configuration file, or the defaults when *path* is None.

    Raises:
        ConfigReadFailed: The file cannot be read.
        ConfigParseFailed: The file is not valid TOML or fails validation.
    """
    if path is None:
        logger.debug("No configuration file, using defaults")
        return Config()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadFailed(str(path), str(e)) from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseFailed(str(path), str(e)) from e

    result = validate_config_data(data)
    for warning in result.warnings:
        logger.warning("%s: %s", path, warning)
    if not result.ok:
        raise ConfigParseFailed(str(path), "\n".join(result.errors))

    logger.debug("Loaded configuration from %s", path)
    return Config.from_dict(data)


def apply_overrides(config: Config, args) -> Config:
    """
    Overlay command-line options on *config*; every option given on the CLI wins.

    *args* is the namespace from ``cli.parse_args``. Flags only ever switch a
    setting on, mirroring the command line, which has no "off" switches.
    """
    general = config.general
    position = config.position
    date = config.date

    color = getattr(args, "color", None)
    interval = getattr(args, "interval", None)
    x_pos = getattr(args, "x_pos", None)
    y_pos = getattr(args, "y_pos", None)
    fmt = getattr(args, "fmt", None)

    general = replace(
        general,
        color=color if color is not None else general.color,
        interval=interval if interval is not None else general.interval,
        blink=general.blink or getattr(args, "blink", False),
        bold=general.bold or getattr(args, "bold", False),
    )
    position = replace(
        position,
        horizontal=x_pos if x_pos is not None else position.horizontal,
        vertical=y_pos if y_pos is not None else position.vertical,
    )
    date = replace(
        date,
        fmt=fmt if fmt is not None else date.fmt,
        use_12h=date.use_12h or getattr(args, "use_12h", False),
        utc=date.utc or getattr(args, "utc", False),
        hide_seconds=date.hide_seconds or getattr(args, "hide_seconds", False),
    )

    return Config(general=general, position=position, date=date)


def resolve_config(args=None, environ: dict | None = None) -> Config:
    """Defaults, then the configuration file, then command-line options."""
    path = resolve_config_path(environ)
    logger.debug("Configuration path: %s", path)
    config = load_config(path)
    if args is not None:
        config = apply_overrides(config, args)
    return config

# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : model.py
#   file_relpath : src/tic80wrap/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin options model and validation.

The options schema accepts exactly one optional string property,
``cartridge_path``. Validation happens eagerly, at plugin construction or
config load time, so that a misconfigured build fails before any build pass
reads the cartridge.

Scope:
    - *In scope*: the options shape, validation and defaulting.
    - *Out of scope*: TOML discovery and parsing (see `tic80wrap.config.loaders`).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from tic80wrap.config.keys import Options
from tic80wrap.config.logging import get_logger
from tic80wrap.constants import DEFAULT_CARTRIDGE_PATH, PLUGIN_NAME
from tic80wrap.errors import ConfigurationError

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PluginOptions:
    """Immutable, validated plugin options.

    Attributes:
        cartridge_path (str | None): Cartridge path, relative to the build context
            unless absolute. ``None`` selects `DEFAULT_CARTRIDGE_PATH`.
    """

    cartridge_path: str | None = None

    @property
    def effective_cartridge_path(self) -> str:
        """Return the configured cartridge path, or the default when unset/empty."""
        return self.cartridge_path or DEFAULT_CARTRIDGE_PATH

    def with_overrides(self, *, cartridge_path: str | None = None) -> PluginOptions:
        """Return a copy with non-None overrides applied (e.g. from CLI flags)."""
        if cartridge_path is None:
            return self
        return replace(self, cartridge_path=cartridge_path)


def validate_options(options: Mapping[str, Any] | None, *, where: str = "options") -> PluginOptions:
    """Validate a raw options mapping and return a `PluginOptions` snapshot.

    Args:
        options (Mapping[str, Any] | None): Raw options (plugin keyword mapping or a
            parsed TOML table). ``None`` is treated as an empty mapping.
        where (str): Human-readable origin of the options, used in error messages.

    Returns:
        PluginOptions: The validated options.

    Raises:
        ConfigurationError: If ``options`` is not a mapping, contains a key other
            than ``cartridge_path``, or ``cartridge_path`` is not a string.
    """
    if options is None:
        return PluginOptions()
    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"Invalid {PLUGIN_NAME} {where}: expected a table/object, "
            f"got {type(options).__name__}"
        )

    unexpected: list[str] = sorted(str(k) for k in options if k not in Options.ALLOWED)
    if unexpected:
        logger.error("Unexpected %s key(s) in %s: %s", PLUGIN_NAME, where, unexpected)
        raise ConfigurationError(
            f"Invalid {PLUGIN_NAME} {where}: unexpected propert"
            f"{'y' if len(unexpected) == 1 else 'ies'} {', '.join(repr(k) for k in unexpected)}"
        )

    raw: Any = options.get(Options.KEY_CARTRIDGE_PATH)
    if Options.KEY_CARTRIDGE_PATH in options and not isinstance(raw, str):
        raise ConfigurationError(
            f"Invalid {PLUGIN_NAME} {where}: '{Options.KEY_CARTRIDGE_PATH}' "
            f"should be a string, got {type(raw).__name__}"
        )

    logger.debug("Validated %s: cartridge_path=%r", where, raw)
    return PluginOptions(cartridge_path=raw)

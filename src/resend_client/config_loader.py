# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Configuration loader for the Resend client.

Settings come from an optional INI file and are overridden by environment
variables.

Example:
    Configuration file format (resend.ini)::

        [resend]
        api_key = re_xxxxxxxxx
        base_url = https://api.resend.com
        timeout = 30

    Environment variables::

        RESEND_API_KEY, RESEND_BASE_URL, RESEND_TIMEOUT

    Loading::

        config = load_client_config("/etc/myapp/resend.ini")
        client = ResendClient.from_config(config)
"""

from __future__ import annotations

import configparser
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ValidationError
from .logger import get_logger

DEFAULT_BASE_URL = "https://api.resend.com"
CONFIG_SECTION = "resend"

logger = get_logger("ResendConfigLoader")


@dataclass
class ClientConfig:
    """Settings for :class:`resend_client.client.ResendClient`.

    Attributes:
        api_key: Resend API key.
        base_url: API endpoint.
        timeout: Total request timeout in seconds, None for aiohttp's default.
    """

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None

    def __repr__(self) -> str:
        key = "***" if self.api_key else None
        return f"ClientConfig(api_key={key!r}, base_url={self.base_url!r}, timeout={self.timeout!r})"


def _parse_timeout(value: str, origin: str) -> float | None:
    value = value.strip()
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ValidationError(f"Invalid timeout in {origin}: {value!r}") from None
    if timeout <= 0:
        raise ValidationError(f"Timeout in {origin} must be positive: {value!r}")
    return timeout


def load_client_config(
    config_path: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Build a :class:`ClientConfig` from an INI file and the environment.

    Args:
        config_path: Optional INI file with a ``[resend]`` section.
        env: Environment mapping, defaults to ``os.environ``.

    Returns:
        The merged configuration. Environment values win over the file.

    Raises:
        FileNotFoundError: If ``config_path`` is given but does not exist.
        ValidationError: If a timeout value is not a positive number.
    """
    config = ClientConfig()
    env = os.environ if env is None else env

    if config_path is not None:
        if not Path(config_path).exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        parser = configparser.ConfigParser()
        parser.read(config_path)
        if parser.has_section(CONFIG_SECTION):
            section = parser[CONFIG_SECTION]
            config.api_key = section.get("api_key") or config.api_key
            config.base_url = section.get("base_url") or config.base_url
            if "timeout" in section:
                config.timeout = _parse_timeout(section["timeout"], str(config_path))
        else:
            logger.info(f"No [{CONFIG_SECTION}] section found in {config_path}")

    if env.get("RESEND_API_KEY"):
        config.api_key = env["RESEND_API_KEY"]
    if env.get("RESEND_BASE_URL"):
        config.base_url = env["RESEND_BASE_URL"]
    if env.get("RESEND_TIMEOUT"):
        config.timeout = _parse_timeout(env["RESEND_TIMEOUT"], "RESEND_TIMEOUT")

    return config

#  Provides a python client for finding nearby air quality stations
#  and aggregating their readings from the WAQI open data feed.
#  Copyright (C) 2025 chickendrop89

#  This library is free software; you can redistribute it and/or modify it
#  under the terms of the GNU Lesser General Public License as published by
#  the Free Software Foundation; either version 3 of the License, or
#  (at your option) any later version.

#  This library is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU Lesser General Public License for more details.

"""
Runtime configuration
"""

import logging
import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from . import const
from .exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Explicit configuration threaded into the geocoder and WAQI client.

    :param waqi_token: WAQI API token
    :param request_timeout: HTTP request timeout in seconds
    :param nominatim_timeout: Geocoding timeout in seconds
    :param user_agent: User-Agent sent to both upstream services
    """

    waqi_token: str
    request_timeout: float = const.REQUEST_TIMEOUT
    nominatim_timeout: float = const.NOMINATIM_TIMEOUT
    user_agent: str = const.USER_AGENT

    def __post_init__(self):
        if not self.waqi_token or not self.waqi_token.strip():
            raise ConfigurationError(
                f"WAQI API token is missing. Set the {const.TOKEN_ENV_VAR} environment variable."
            )
        for timeout in (self.request_timeout, self.nominatim_timeout):
            if not math.isfinite(timeout) or timeout <= 0:
                raise ConfigurationError("Timeouts must be positive finite numbers of seconds.")

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "Settings":
        """
        Build settings from the process environment, loading a `.env` file first.

        Values already present in the environment take precedence over the file.

        :param dotenv_path: Explicit path to a `.env` file, searched for if omitted
        :type dotenv_path: str, optional
        :return: Validated settings
        :rtype: Settings
        :raises ConfigurationError: If the token is missing or a timeout is invalid
        """
        load_dotenv(dotenv_path)

        token = os.getenv(const.TOKEN_ENV_VAR, "")
        request_timeout = _read_timeout(const.REQUEST_TIMEOUT_ENV_VAR, const.REQUEST_TIMEOUT)
        nominatim_timeout = _read_timeout(const.NOMINATIM_TIMEOUT_ENV_VAR, const.NOMINATIM_TIMEOUT)

        settings = cls(
            waqi_token=token.strip(),
            request_timeout=request_timeout,
            nominatim_timeout=nominatim_timeout,
        )
        _LOGGER.debug(
            "Loaded settings (request timeout %ss, nominatim timeout %ss).",
            settings.request_timeout,
            settings.nominatim_timeout,
        )
        return settings


def _read_timeout(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number of seconds, got '{raw}'.") from exc

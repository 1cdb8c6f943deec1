"""Config settings – RelaySettings for the chat-forwarding decorator."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from relaylog.config.settings.base import Settings
from relaylog.config.validation import InvalidSettingValueError
from relaylog.kernel.log import LogLevel


@dataclasses.dataclass
class RelaySettings(Settings):
    """Environment-driven configuration, e.g.::

        RELAYLOG_CHAT_ID=-100123456
        RELAYLOG_REQUEST_URI=https://api.telegram.org/bot<token>/sendMessage
        RELAYLOG_MIN_LEVEL=warning
        RELAYLOG_TIMEOUT=5
    """

    _prefix: ClassVar[str] = "RELAYLOG"

    chat_id: int | None = None
    request_uri: str | None = None
    min_level: str = "INFO"
    timeout: float = 10.0
    verify_tls: bool = True

    def _validate(self) -> None:
        try:
            LogLevel.parse(self.min_level)
        except ValueError as exc:
            raise InvalidSettingValueError("min_level", self.min_level, str(exc)) from exc
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")

    @property
    def minimum_severity(self) -> LogLevel:
        return LogLevel.parse(self.min_level)


__all__ = ["RelaySettings"]

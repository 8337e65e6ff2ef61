"""Config settings – MobilePay and AppSwitch settings loaded from the environment."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mobilepay.api.config import DEFAULT_BASE_URL, MobilePayConfig
from mobilepay.appswitch.config import APPSWITCH_API_URL, AppSwitchConfig
from mobilepay.config.settings.base import Settings
from mobilepay.config.validation import InvalidSettingValueError
from mobilepay.security.keys import SigningKeyPair


def _check_url(name: str, value: str) -> None:
    if not value.startswith(("https://", "http://")):
        raise InvalidSettingValueError(name, value, "must be an http(s) URL")


def _check_timeout(name: str, value: float) -> None:
    if value <= 0:
        raise InvalidSettingValueError(name, value, "must be positive")


@dataclasses.dataclass
class MobilePaySettings(Settings):
    """``MOBILEPAY_CLIENT_ID``, ``MOBILEPAY_API_KEY``, ``MOBILEPAY_BASE_URL``, ``MOBILEPAY_TIMEOUT``."""

    _prefix: ClassVar[str] = "MOBILEPAY"

    client_id: str
    api_key: str = dataclasses.field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0

    def _validate(self) -> None:
        _check_url("base_url", self.base_url)
        _check_timeout("timeout", self.timeout)

    def to_config(self) -> MobilePayConfig:
        return MobilePayConfig(
            client_id=self.client_id,
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
        )


@dataclasses.dataclass
class AppSwitchSettings(Settings):
    """``APPSWITCH_*`` settings; key paths point at PEM files."""

    _prefix: ClassVar[str] = "APPSWITCH"

    merchant_id: str
    subscription_key: str = dataclasses.field(repr=False)
    private_key_path: str
    public_key_path: str
    private_key_password: str = dataclasses.field(default="", repr=False)
    url: str = APPSWITCH_API_URL
    timeout: float = 5.0
    test_mode: bool = False

    def _validate(self) -> None:
        if not self.merchant_id:
            raise InvalidSettingValueError("merchant_id", self.merchant_id, "cannot be empty")
        _check_url("url", self.url)
        _check_timeout("timeout", self.timeout)

    def to_config(self) -> AppSwitchConfig:
        key_pair = SigningKeyPair.from_files(
            self.private_key_path,
            self.public_key_path,
            password=self.private_key_password or None,
        )
        return AppSwitchConfig(
            merchant_id=self.merchant_id,
            subscription_key=self.subscription_key,
            key_pair=key_pair,
            url=self.url,
            timeout=self.timeout,
            test_mode=self.test_mode,
        )


__all__ = ["AppSwitchSettings", "MobilePaySettings"]

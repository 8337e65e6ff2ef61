"""
mobilepay – MobilePay API client library.

Import path convention::

    from mobilepay.api import MobilePayClient, MobilePayConfig
    from mobilepay.appswitch import AppSwitchClient, AppSwitchConfig
    from mobilepay.security.webhooks import WebhookVerifier
    from mobilepay.kernel.errors import MobilePayError
"""

__version__ = "1.0.0"
__all__ = ["__version__"]

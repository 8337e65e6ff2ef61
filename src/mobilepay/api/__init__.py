"""Payments API – payments, refunds and webhook subscriptions."""
from mobilepay.api.client import MobilePayClient
from mobilepay.api.config import DEFAULT_BASE_URL, TEST_BASE_URL, MobilePayConfig
from mobilepay.api.options import ListOptions, RefundsListOptions
from mobilepay.api.payments import CreatePaymentResponse, Payment, PaymentParams, PaymentService, PaymentsPage
from mobilepay.api.refunds import Refund, RefundParams, RefundService, RefundsPage
from mobilepay.api.webhooks import (
    Webhook,
    WebhookCreateParams,
    WebhookEvent,
    WebhookService,
    WebhookUpdateParams,
)

__all__ = [
    "CreatePaymentResponse",
    "DEFAULT_BASE_URL",
    "ListOptions",
    "MobilePayClient",
    "MobilePayConfig",
    "Payment",
    "PaymentParams",
    "PaymentService",
    "PaymentsPage",
    "Refund",
    "RefundParams",
    "RefundService",
    "RefundsListOptions",
    "RefundsPage",
    "TEST_BASE_URL",
    "Webhook",
    "WebhookCreateParams",
    "WebhookEvent",
    "WebhookService",
    "WebhookUpdateParams",
]

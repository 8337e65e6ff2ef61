"""AppSwitch – legacy reservation/capture flow with signed requests."""
from mobilepay.appswitch.auth import SignatureAuthenticator
from mobilepay.appswitch.client import AppSwitchClient
from mobilepay.appswitch.config import APPSWITCH_API_URL, AppSwitchConfig
from mobilepay.appswitch.models import (
    CanceledReservation,
    CaptureParams,
    CaptureType,
    CapturedReservation,
    GetReservationsParams,
    PaymentStatus,
    PaymentStatusType,
    PaymentTransaction,
    RefundedReservation,
    RefundParams,
    Reservation,
)

__all__ = [
    "APPSWITCH_API_URL",
    "AppSwitchClient",
    "AppSwitchConfig",
    "CanceledReservation",
    "CaptureParams",
    "CaptureType",
    "CapturedReservation",
    "GetReservationsParams",
    "PaymentStatus",
    "PaymentStatusType",
    "PaymentTransaction",
    "RefundParams",
    "RefundedReservation",
    "Reservation",
    "SignatureAuthenticator",
]

"""X-Stripe-User-Agent descriptor."""

import json
import platform
from dataclasses import dataclass

# Stripe classifies pk_token traffic by the mobile SDK that originally sent it
BINDINGS_LANG = "objective-c"
BINDINGS_VERSION = "8.0.5"


@dataclass(frozen=True)
class DeviceInfo:
    """Host device description reported to Stripe."""

    os_version: str
    model: str

    @classmethod
    def current(cls) -> "DeviceInfo":
        return cls(os_version=platform.release(), model=platform.machine())


def stripe_user_agent_details(device: DeviceInfo | None = None) -> str:
    """
    Build the JSON value of the X-Stripe-User-Agent header.

    Args:
        device: Device to describe (defaults to the current host)

    Returns:
        Compact JSON object with lang, bindings_version, os_version and model
    """
    if device is None:
        device = DeviceInfo.current()

    details = {
        "lang": BINDINGS_LANG,
        "bindings_version": BINDINGS_VERSION,
        "os_version": device.os_version,
        "model": device.model,
    }
    return json.dumps(details, separators=(",", ":"))

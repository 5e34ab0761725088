"""Notifications sent to museum visitors."""

from __future__ import annotations

from typing import Mapping

from museumdesk.user import User


def send_alert(user: User, message: str) -> str:
    """Text of a notification for one user, with a VIP line for VIP holders."""
    text = f"This Notification is for {user.name}: {message}"
    if user.has_vip_pass():
        text += "\nThis is an exclusive notification for VIP users!"
    return text


def notify_all(users: Mapping[str, User], message: str) -> str:
    """A heading followed by one alert per user, in order of user name."""
    parts = ["=== Sending Notification to All Users ==="]
    parts.extend(send_alert(user, message) for _, user in sorted(users.items()))
    return "\n".join(parts)
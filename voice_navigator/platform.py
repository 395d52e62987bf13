"""
Platform Detection - Classify the host OS family.

The classification only selects a voice-resolution strategy: Apple
devices ship a named Korean voice that sounds better than whatever the
browser reports as its default.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class Platform(Enum):
    """Host OS family."""
    IOS_LIKE = auto()  # iPhone, iPad, iPod, iPadOS desktop mode
    OTHER = auto()


_IOS_USER_AGENT = re.compile(r"iphone|ipad|ipod")


def detect_platform(
    user_agent: str,
    platform: str = "",
    max_touch_points: int = 0,
) -> Platform:
    """Classify the host from its identification strings.
    
    iPadOS in desktop mode reports a Mac user agent, so a "MacIntel"
    platform with a multi-touch screen is treated as iOS too.
    
    Args:
        user_agent: Host user-agent string
        platform: Host platform identifier (e.g. "MacIntel", "Win32")
        max_touch_points: Number of simultaneous touch points supported
    
    Returns:
        Platform classification
    """
    ua = (user_agent or "").lower()
    plat = (platform or "").lower()
    
    if _IOS_USER_AGENT.search(ua):
        return Platform.IOS_LIKE
    if plat == "macintel" and max_touch_points > 1:
        return Platform.IOS_LIKE
    return Platform.OTHER


@dataclass(frozen=True)
class HostInfo:
    """Identification strings reported by the host."""
    user_agent: str = ""
    platform: str = ""
    max_touch_points: int = 0
    
    def detect(self) -> Platform:
        """Classify this host."""
        return detect_platform(self.user_agent, self.platform, self.max_touch_points)

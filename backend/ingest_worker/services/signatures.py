"""User-agent lookup for browser and operating system names.

Parsing is done by ``user-agents`` (uap-core signatures); its family names
are folded into the display names stored with each record.
"""
from typing import Optional

from user_agents import parse
from user_agents.parsers import UserAgent

BROWSER_FAMILIES = {
    "Chrome": "Chrome",
    "Chrome Mobile": "Chrome",
    "Chrome Mobile iOS": "Chrome",
    "Chrome Mobile WebView": "Chrome",
    "Chromium": "Chrome",
    "Edge": "Edge",
    "Edge Mobile": "Edge",
    "Firefox": "Firefox",
    "Firefox Mobile": "Firefox",
    "Firefox iOS": "Firefox",
    "IE": "Internet Explorer",
    "IE Mobile": "Internet Explorer",
    "Mobile Safari": "Safari",
    "Mobile Safari UI/WKWebView": "Safari",
    "Opera": "Opera",
    "Opera Mini": "Opera",
    "Opera Mobile": "Opera",
    "Safari": "Safari",
    "Samsung Internet": "Samsung Internet",
}

OS_FAMILIES = {
    "Android": "Android",
    "Chrome OS": "Chrome OS",
    "Debian": "Linux",
    "Fedora": "Linux",
    "iOS": "iOS",
    "Linux": "Linux",
    "Mac OS X": "Mac OS",
    "Ubuntu": "Linux",
}


def _parse(user_agent: Optional[str]) -> Optional[UserAgent]:
    if not user_agent:
        return None
    return parse(user_agent)


def browser_name(user_agent: Optional[str]) -> Optional[str]:
    """
    Resolve the browser name advertised by a user agent.

    Args:
        user_agent: Raw ``user-agent`` header value

    Returns:
        Browser name, or None when absent, unrecognized, or a crawler
    """
    parsed = _parse(user_agent)
    if parsed is None:
        return None
    # Crawlers report their own family (Googlebot, bingbot, ...) and fall
    # outside the map, even when they also advertise a browser token.
    return BROWSER_FAMILIES.get(parsed.browser.family)


def detect_os(user_agent: Optional[str]) -> Optional[str]:
    """Resolve the operating system name, or None when unrecognized."""
    parsed = _parse(user_agent)
    if parsed is None:
        return None
    family = parsed.os.family
    # uap-core reports "Windows" or versioned names such as "Windows 10"
    if family.startswith("Windows"):
        return "Windows"
    return OS_FAMILIES.get(family)

"""Local configuration for blockplan."""

from __future__ import annotations

import os


DEFAULT_ANCHOR_COMPONENT = "formBlock"
DEFAULT_BREAKOUT_COMPONENTS = "marqueeLinks,carousel"

# Component-block name that embeds the inquiry form and splits the document.
BLOCKPLAN_ANCHOR_COMPONENT = os.getenv("BLOCKPLAN_ANCHOR_COMPONENT", DEFAULT_ANCHOR_COMPONENT)
# Component-block names rendered edge to edge instead of inside a panel.
BLOCKPLAN_BREAKOUT_COMPONENTS = frozenset(
    name.strip()
    for name in os.getenv("BLOCKPLAN_BREAKOUT_COMPONENTS", DEFAULT_BREAKOUT_COMPONENTS).split(",")
    if name.strip()
)

"""
Analytics package exports.
"""

from core.analytics.service import build_xp_dashboard
from core.analytics.types import XpDashboardData

__all__ = [
    "build_xp_dashboard",
    "XpDashboardData",
]

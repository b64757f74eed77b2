"""
Services package for the tenant reset tool.

Each module owns one step of the reset; `reset` runs them in order.
"""

from tenant_reset.services.reset import ResetResult, TenantReset

__all__ = ["ResetResult", "TenantReset"]

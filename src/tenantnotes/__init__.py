"""
Tenant Notes Backend - Multi-tenant note taking API

Organizations register as tenants, invite members and keep their notes
isolated from every other tenant. Free tenants are capped at a handful of
notes until they upgrade to the Pro plan.
"""

__version__ = "1.0.0"

"""
Endpoint subpackage.

Each module defines an APIRouter for one form (waitlist, contact) or
for operational routes such as the health check.
"""

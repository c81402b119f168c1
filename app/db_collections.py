"""
Centralised MongoDB collection names.
Single source of truth for collection names.

Every repository and router imports collection names from here.
Never hardcode collection name strings.
"""

# ===========================================
# MAIN COLLECTIONS
# ===========================================

# Employee records: one document per employee
COLL_EMPLOYEES = "employees"

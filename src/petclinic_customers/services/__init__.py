"""
petclinic_customers.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
"""

# Package marker.

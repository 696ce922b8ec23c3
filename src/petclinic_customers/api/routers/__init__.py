"""
petclinic_customers.api.routers

HTTP routers (health probes and the owners resource).
"""

"""
Use cases for the record services.

Routers call these services; services take the StoreGuard lock and never
hand the Database out of a critical section.
"""

"""
Service layer abstraction.

Each service encapsulates the business rules for one form.  Services
receive the submission store as an argument, so the in‑memory store
can be swapped for a database without changing API handlers.
"""

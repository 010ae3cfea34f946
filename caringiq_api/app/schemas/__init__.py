"""
Pydantic schema definitions for API payloads and stored records.

Each form (waitlist, contact) defines a ``*Create`` model for the
request body and a read model for the record held by the submission
store.  Read models serialize ``created_at`` as ``createdAt`` to keep
the wire format the landing page front end expects.
"""

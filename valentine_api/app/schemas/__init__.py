"""
Pydantic schema definitions for API payloads.

Both endpoints return small, fixed-shape records.  The models only
describe the response bodies; there are no request payloads.
"""

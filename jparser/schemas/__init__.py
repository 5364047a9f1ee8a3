"""
Pydantic schemas for API request and response validation.

Request bodies MUST subclass StrictRequestModel so unknown keys are rejected.
"""

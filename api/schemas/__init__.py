"""
API Schemas - Pydantic models for request/response validation

These schemas define the JSON contract between the API and clients.
"""

"""
User Management Module

Separation of concerns:
- auth: Password hashing, token issuance and the bearer gate
- domain: Domain models
- services: Business logic
- repositories: Data access
- api: REST API endpoints
"""

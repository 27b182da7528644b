"""
Task Module

Tasks owned by users:
- domain: Domain models
- repositories: Data access
- services: Business logic
- api: REST API endpoints
"""

"""Service layer for business logic.

Layer hierarchy:
    Caller (transport, auth) -> Services (validation) -> Repositories (Database)

Services should:
- Validate input that the repository must never see (e.g. empty patches)
- Delegate persistence to repositories

Services should NOT:
- Directly execute SQL queries (use repositories)
- Know about HTTP request/response details
"""

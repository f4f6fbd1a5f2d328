"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- movies: Create, read, update and delete movie records
- health: Health checks and system info
"""

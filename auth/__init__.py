"""
auth — User authentication module.

Provides:
  • JWT token creation & verification (PyJWT, HS256)
  • Password hashing (bcrypt)
  • Register / Login service and API routes
  • ``get_current_user`` FastAPI dependency
"""

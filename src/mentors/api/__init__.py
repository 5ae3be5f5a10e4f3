"""
FastAPI REST API for the Mentors lead-management tool

Provides REST endpoints for the static pages:
- User signup/login
- Developers, availability listings and leads (admin-gated writes)
- Page serving and health checks
"""

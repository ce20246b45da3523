# Middleware package init
"""
Retro Board Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to requests.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error envelopes
    2. Logging: Log request details with the generated request ID
    3. GZip: Compresses large list responses
    4. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)

    The order is reversed for responses: the request ID header is added last,
    after logging has captured status and duration.

Route-level dependency:
    auth.authenticate_user gates individual routes on the Authorization header.
"""

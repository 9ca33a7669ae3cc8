# Middleware package init
"""
Notes API — Middleware Package
===============================

Middleware Chain (order matters!):
    Request → [CORS] → [Request ID] → [Logging] → [Errors] → Route Handler

    1. CORS: Answers preflight requests; any origin is allowed
    2. Request ID: Generates the correlation ID used by loggers
    3. Logging: Logs method and path before the handler runs
    4. Errors: Turns an unexpected exception into the 500 JSON body

    Responses travel back through the same chain in reverse, which is how
    the X-Request-ID header and the completion log line are added.
"""

"""
API Routes - HTTP endpoint handlers

Each area gets its own router, included in the main app under /api/v1.
"""

"""
API Middleware - request/response processing
"""

"""
API routers for the Client Service
"""

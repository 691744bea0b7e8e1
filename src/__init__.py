"""
MoMo Gateway - Mobile Money Collection Façade

A FastAPI-based microservice that forwards payment requests, status
queries and balance lookups to the MTN MoMo Collection API and accepts
the provider's asynchronous result callbacks.
"""

__version__ = "0.1.0"

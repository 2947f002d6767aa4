"""
API Module

FastAPI application exposing mission planning over HTTP.
"""

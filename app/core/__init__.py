"""
AviLearn Backend - Core Module

Configuration, database setup, logging, HTTP client and security utilities.

Submodules are imported explicitly (``from app.core.config import settings``)
so that the HTTP client can be used by the player-side tracking package
without loading server settings.
"""

# -*- coding: utf-8 -*-
"""
Supabase client for the admin console
"""
from functools import lru_cache
import logging

from supabase import create_client, Client

from app.core.config import settings, validate_required_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Create the Supabase client once required settings are validated"""
    config = validate_required_settings(settings)
    try:
        client = create_client(config.auth_service_url, config.service_key)
        logger.info("Supabase client created")
        return client
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        raise

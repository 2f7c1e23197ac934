# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger shared by argmatch modules."""
import logging

logger = logging.getLogger("argmatch")

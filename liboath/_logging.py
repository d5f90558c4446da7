import logging

logger = logging.getLogger("liboath")

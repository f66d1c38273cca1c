"""Constants module for the GraphQL transport.

This module contains the messages and media types shared between the
transport, the encoder and the tests.
"""

# Wildcard imports give a single import point for all constants.
from .error_constants import *  # noqa: F403
from .http_status_constants import *  # noqa: F403
from .media_type_constants import *  # noqa: F403

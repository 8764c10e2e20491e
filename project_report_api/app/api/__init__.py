"""
API package containing versioned routes.

This package groups API versions under subpackages such as ``v1``.
Helpers shared by every version (service dependencies and the mapping
of service errors to HTTP responses) live at this level.
"""

"""Content Webhooks Module

Handles change notifications from the content service: validates the payload
and invalidates (and, on publish, re-warms) the cached content it affects."""

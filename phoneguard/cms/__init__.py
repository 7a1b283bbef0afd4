"""Contentstack delivery client."""

from phoneguard.cms.stack import ContentType, Query, Stack, build_stack

__all__ = ["ContentType", "Query", "Stack", "build_stack"]

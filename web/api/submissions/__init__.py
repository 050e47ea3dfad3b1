"""Submissions API."""

from web.api.submissions.views import post_submit, router

__all__ = [
    "router",
    "post_submit",
]

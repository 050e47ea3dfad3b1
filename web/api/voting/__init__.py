"""Voting API."""

from web.api.voting.views import post_vote, router

__all__ = [
    "router",
    "post_vote",
]

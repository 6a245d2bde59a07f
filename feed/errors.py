"""Feed errors."""

from __future__ import annotations


class FeedError(Exception):
    """Base feed error."""


class FetchError(FeedError):
    """Page fetch failed (surfaced to the caller as ``FeedState.error``)."""


class TransportError(FetchError):
    """Network/connectivity failure (connect error, timeout, ...)."""


class ProviderError(FetchError):
    """Provider answered with a non-success status or an error payload."""


class EmptyRegionRecoverable(FeedError):
    """Localized query returned no items; triggers the global fallback.

    Raised and consumed inside the resolver only.
    """

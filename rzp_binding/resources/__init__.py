"""
Resource wrappers.

One module per API resource family. Each wrapper only shapes requests
(URL + query/body) and delegates to the transport it was built with.
"""
from .subscriptions import SubscriptionResource

__all__ = ["SubscriptionResource"]

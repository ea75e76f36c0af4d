"""
Money tracker API client.

An authenticated HTTP layer in front of the money tracking service: bearer
auth from a pluggable session store, session teardown on 401, typed
envelopes, and one method per backend operation.
"""

__version__ = "0.1.0"

"""
Dispatch layer.

The Dispatcher interface and its two variants: CoreReportingClient sends
each call immediately, BatchRequest queues calls and sends them as one
bulk request. Import them from ``matomo_client.dispatch.http`` and
``matomo_client.dispatch.batch``, or from the top-level package.
"""

"""Business event notification dispatcher for the field-service platform.

Application code emits events through
``notifier.application.use_cases.notify``; the HTTP API lives in ``main``.
"""

"""Adapters binding the core ports to urllib, the process environment and
the Telegram Bot API."""

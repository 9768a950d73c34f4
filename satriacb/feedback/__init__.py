"""Feedback forwarding package.

Scope:
    Relays feedback collected by the browser UI to a messaging-bot chat.
"""

"""Notifications app package.

Sends booking confirmations through the WhatsApp gateway: caption text, the
PDF confirmation document and the HTTP client live here.
"""

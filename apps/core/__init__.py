"""Core app package.

Site-wide pieces shared by the other apps: the global settings singleton
edited in the admin, locale resolution for the trilingual site and the
JSON exception handler used by every API view.
"""

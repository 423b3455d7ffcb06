"""
Quart showcase application.

A tour of the Quart web framework: routing, request access, form and JSON
binding, file upload/download, route groups, static files, templates and a
prefork Hypercorn server.
"""

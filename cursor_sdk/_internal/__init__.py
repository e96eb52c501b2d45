"""Internal modules for Cursor SDK.

WARNING: These modules back the public client and may change without notice.

Modules:
    dispatch - Request dispatch and response mapping
    http - Shared HTTP client configuration
    redaction - Secret redaction for debug output
"""

"""
API layer for the Device CRUD backend.

Exposes the device endpoints under /private/v1/device and the JSON error
handlers that turn DeviceError kinds into HTTP status codes.
"""

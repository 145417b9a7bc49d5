"""
Application package initializer.

The service is split into small pieces: ``core`` holds settings,
logging, errors and the cross‑origin policy; ``schemas`` the response
models; ``services`` the quote bank and the random selector; and
``api`` the route table with its endpoint modules.
"""

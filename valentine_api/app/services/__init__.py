"""
Service layer.

``quote_service`` owns the quote bank and the random selector;
``response_service`` turns their output into response models.  The
endpoint modules only wire these to HTTP.
"""

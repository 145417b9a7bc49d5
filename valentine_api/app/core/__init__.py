"""Settings, logging, errors and cross‑origin policy."""

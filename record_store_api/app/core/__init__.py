"""
Cross‑cutting building blocks: settings, logging, error kinds, id
generation and the JSON response class.
"""

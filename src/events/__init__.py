"""Events module - Hook handlers.

TIER 3: Entry points, may import from all layers.

Handlers:
- after_prepare.py: Cordova after_prepare hook (local development mode)
"""

"""
Contemplate - resource name resolution and decorated controller invocation

Contemplate resolves logical resource names (templates, controllers, static
resources) to files across namespaced folders and layered themes, and runs
controllers through declarative decorator chains.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]

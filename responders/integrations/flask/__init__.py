from .responder import respond

__all__ = ["respond"]

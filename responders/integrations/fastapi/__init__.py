from .responder import ResponderJSONResponse

__all__ = ["ResponderJSONResponse"]

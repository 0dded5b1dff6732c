from .responses import to_json_response

__all__ = ["to_json_response"]

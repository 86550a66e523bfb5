from .responses import register_error_handlers, unwrap

__all__ = ["register_error_handlers", "unwrap"]

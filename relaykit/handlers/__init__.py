from .asgi import GraphQLHandler

__all__ = ["GraphQLHandler"]

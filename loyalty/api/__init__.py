from .loyalty import router as loyalty_router

__all__ = ["loyalty_router"]

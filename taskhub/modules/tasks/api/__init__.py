from .task_endpoints import router as task_router

__all__ = [
    "task_router",
]

from typing import Annotated

from fastapi import Depends, Request

from trainerdex.db.connection import DatabasePool


def get_pool(request: Request) -> DatabasePool:
    """The pool opened by the app lifespan."""
    return request.app.state.pool


PoolDep = Annotated[DatabasePool, Depends(get_pool)]

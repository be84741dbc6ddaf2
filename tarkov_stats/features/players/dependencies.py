"""Dependencies for the players feature.

The service is built once by the application lifespan and shared by all
requests, so the search index cache lives for the whole process.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from .service import PlayerService


def get_player_service(request: Request) -> PlayerService:
    """Get the application's player service.

    :param request: Incoming request
    :returns: Player service created at startup
    :raises HTTPException: 503 if the application has not finished starting
    """
    service = getattr(request.app.state, "player_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Player service not initialized",
        )
    return service


# Type aliases for cleaner dependency injection
PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]

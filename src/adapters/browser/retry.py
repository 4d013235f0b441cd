"""
Mecanisme de reprise apres perte du navigateur.

Une ouverture de page qui echoue parce que le processus navigateur est mort
(SessionError) declenche un redemarrage complet puis une seule nouvelle
tentative. Les autres erreurs sont propagees immediatement.

Usage:
    async for attempt in session_recovery(on_retry=manager.restart):
        with attempt:
            page = await manager._new_page(locale)
"""

from typing import Awaitable, Callable

from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_none,
)

from src.core.exceptions import SessionError


def session_recovery(
    on_retry: Callable[[], Awaitable[None]],
    max_attempts: int = 2,
) -> AsyncRetrying:
    """
    Construit la boucle de reprise sur SessionError.

    Args:
        on_retry: Coroutine appelee avant chaque nouvelle tentative
                  (redemarrage du navigateur)
        max_attempts: Nombre total de tentatives (defaut: 2, soit une reprise)

    Returns:
        Iterateur async tenacity; la derniere SessionError est relancee telle quelle
    """

    async def _before_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.error(
            "Ouverture de page impossible, redemarrage du navigateur",
            attempt=retry_state.attempt_number,
            error=str(error),
        )
        await on_retry()

    return AsyncRetrying(
        retry=retry_if_exception_type(SessionError),
        stop=stop_after_attempt(max_attempts),
        wait=wait_none(),
        before_sleep=_before_retry,
        reraise=True,
    )

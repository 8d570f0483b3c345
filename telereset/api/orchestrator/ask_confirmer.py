import inspect
from collections.abc import Awaitable, Callable

Confirmer = Callable[[str], "Awaitable[bool] | bool"]
"""Yes/no prompt shown to the user; may be a plain function or a coroutine function."""


async def ask_confirmer(confirm: Confirmer | None, message: str) -> bool:
    """Ask ``confirm``; a missing confirmer or any answer other than True means no."""
    if confirm is None:
        return False
    answer = confirm(message)
    if inspect.isawaitable(answer):
        answer = await answer
    return answer is True

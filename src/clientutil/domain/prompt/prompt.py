"""Interactive prompts: ask for input and wait for the matching reply."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from clientutil.config.prompt import DEFAULT_PROMPT_TIMEOUT_SECONDS
from clientutil.domain.ports import DirectPeer

from .errors import PromptSendError
from .session import PromptContext, PromptSession

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Mapping

    from clientutil.domain.model import Identified
    from clientutil.domain.ports import Message, PromptTarget, TextChannel

    from .session import PromptCheck

log = getLogger(__name__)


async def prompt(
    target: PromptTarget,
    content: str | None = None,
    check: PromptCheck | None = None,
    timeout: float = DEFAULT_PROMPT_TIMEOUT_SECONDS,
    options: Mapping[str, Any] | None = None,
    *,
    cancel: asyncio.Event | None = None,
) -> Message:
    """Prompt ``target.author`` in ``target.channel`` and return the first accepted reply.

    When ``content`` or ``options`` is given it is sent first, and that message is
    never mistaken for the reply. ``check`` is either a callable receiving
    ``(message, sent)`` (any result other than ``None``/``False`` accepts) or a
    regular expression searched in the message content. Rejected replies keep
    the prompt waiting until ``timeout`` seconds elapse.

    Raises :class:`~clientutil.domain.prompt.errors.PromptSendError`,
    :class:`~clientutil.domain.prompt.errors.PromptCheckError`,
    :class:`~clientutil.domain.prompt.errors.PromptTimeoutError` or
    :class:`~clientutil.domain.prompt.errors.PromptCancelledError`.
    """

    session = PromptSession(
        target.channel,
        target.author.id,
        check=check,
        timeout=timeout,
        cancel=cancel,
    )
    if content or options is not None:
        await session.send(content, options)
    return await session.collect()


async def prompt_in(
    target: TextChannel | DirectPeer,
    user: Identified | None = None,
    content: str | None = None,
    check: PromptCheck | None = None,
    timeout: float = DEFAULT_PROMPT_TIMEOUT_SECONDS,
    options: Mapping[str, Any] | None = None,
    *,
    cancel: asyncio.Event | None = None,
) -> Message:
    """Prompt in a specific channel, or in a user's private channel.

    ``target`` is either a text channel (then ``user`` names the author to wait
    for) or a user, who is then prompted through their private channel.
    """

    if isinstance(target, DirectPeer):
        return await _prompt_direct(
            target, content, check=check, timeout=timeout, options=options, cancel=cancel
        )

    if user is None:
        raise ValueError("A user is required when prompting in a channel")
    return await prompt(
        PromptContext(channel=target, author=user),
        content,
        check,
        timeout,
        options,
        cancel=cancel,
    )


async def _prompt_direct(
    peer: DirectPeer,
    content: str | None,
    *,
    check: PromptCheck | None,
    timeout: float,
    options: Mapping[str, Any] | None,
    cancel: asyncio.Event | None,
) -> Message:
    sent: Message | None = None
    if content or options is not None:
        try:
            sent = await peer.send(content, **dict(options or {}))
        except Exception as exc:
            log.warning("Sending prompt to user %s failed: %r", peer.id, exc)
            raise PromptSendError(f"Could not send prompt: {exc}") from exc

    channel = (sent.channel if sent is not None else None) or peer.dm_channel
    if channel is None:
        channel = await peer.create_dm()
    return await prompt(
        PromptContext(channel=channel, author=peer),
        None,
        check,
        timeout,
        None,
        cancel=cancel,
    )


__all__ = ["prompt", "prompt_in"]

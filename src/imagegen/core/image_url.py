"""Upstream image URL construction.

The generator never downloads images on the server.  It turns a prompt into a
GET-able URL on the Pollinations service and lets the browser fetch it::

    https://image.pollinations.ai/prompt/<encoded-prompt>?width=1024&height=1024&nologo=true&seed=<ms>

The seed is the current wall-clock time in milliseconds, so two requests for
the same prompt made at different times produce different URLs and the
service does not hand back a cached image.
"""

from __future__ import annotations

import time
from urllib.parse import quote

from imagegen.core.config import ImageGenConfig, config

# Characters left unescaped by the browser's encodeURIComponent, on top of
# the ASCII letters and digits that quote() never escapes.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_prompt(prompt: str) -> str:
    """Percent-encode a prompt as a single URL path segment.

    Matches JavaScript's ``encodeURIComponent``: the prompt is UTF-8 encoded
    and everything except letters, digits and ``-_.!~*'()`` is escaped.
    Spaces become ``%20`` and reserved characters such as ``/``, ``?`` and
    ``&`` are escaped so they cannot alter the URL structure.

    Args:
        prompt: Raw prompt text.

    Returns:
        The encoded prompt.

    Raises:
        UnicodeEncodeError: If the prompt contains a lone surrogate and
            therefore has no UTF-8 representation.
    """
    return quote(prompt, safe=_URI_COMPONENT_SAFE, encoding="utf-8", errors="strict")


def current_seed() -> int:
    """Return the current time in integer milliseconds."""
    return int(time.time() * 1000)


def build_image_url(
    prompt: str,
    settings: ImageGenConfig = config,
    *,
    seed: int | None = None,
) -> str:
    """Build the upstream image URL for a prompt.

    This is pure string templating: no request is made to the image service.

    Args:
        prompt: Prompt text.  Must already be validated as a non-blank string.
        settings: Configuration supplying the base URL, dimensions and
            watermark flag.  Defaults to the global configuration.
        seed: Cache-busting seed.  ``None`` uses :func:`current_seed`.

    Returns:
        The absolute image URL.
    """
    if seed is None:
        seed = current_seed()

    base_url = settings.image_service_url.rstrip("/")
    nologo = "true" if settings.nologo else "false"

    return (
        f"{base_url}/{encode_prompt(prompt)}"
        f"?width={settings.image_width}&height={settings.image_height}"
        f"&nologo={nologo}&seed={seed}"
    )
